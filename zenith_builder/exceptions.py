"""
Exceptions Zenith Builder.

Toutes les erreurs sont limitées à une action utilisateur : aucune n'est fatale au process.
"""


class BuilderError(Exception):
    """Erreur de base du builder."""


class UnknownBlockTypeError(BuilderError, ValueError):
    """Type de bloc hors des 15 variantes connues."""

    def __init__(self, block_type):
        self.block_type = block_type
        super().__init__(f"Bloc inconnu : {block_type!r}")


class GenerationError(BuilderError):
    """Échec de la génération de contenu externe (Magic Build)."""


class MalformedResponseError(GenerationError):
    """Réponse IA illisible : JSON invalide, type absent ou inconnu, contenu mal formé."""


class GenerationUnavailableError(GenerationError):
    """Erreur transport / authentification / aucune clé API configurée."""
