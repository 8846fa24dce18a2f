"""
Dialogue Magic Build — état du prompt et drapeau de génération en cours.

Le document reste modifiable pendant la génération (aucun verrou). Une réponse
reçue après fermeture du dialogue est ignorée.
"""
import asyncio
import logging
from typing import Callable, List, Optional

from ..blocks.base import Block
from ..editor.document import DocumentEditor
from ..exceptions import GenerationError, MalformedResponseError
from .ai import ContentGenerator

log = logging.getLogger(__name__)

INVALID_RESPONSE_ALERT = "AI response format was invalid. Please try again."
GENERATION_FAILED_ALERT = "Failed to generate content. Please verify API key and try again."


class MagicBuildDialog:
    def __init__(self, editor: DocumentEditor, generator: ContentGenerator,
                 alert: Optional[Callable[[str], None]] = None):
        self.editor = editor
        self.generator = generator
        self.is_open = False
        self.prompt = ""
        self.is_generating = False
        self.alerts: List[str] = []
        self._alert = alert

    @property
    def can_submit(self) -> bool:
        return bool(self.prompt.strip()) and not self.is_generating

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        if self._alert is not None:
            self._alert(message)

    async def submit(self) -> Optional[Block]:
        """
        Lance la génération (thread de travail), insère le bloc en fin de document.
        Erreur → alerte utilisateur, document inchangé, pas de nouvel essai.
        """
        if not self.can_submit:
            return None
        self.is_generating = True
        error: Optional[GenerationError] = None
        candidate = None
        try:
            candidate = await asyncio.to_thread(self.generator.generate, self.prompt)
        except GenerationError as e:
            error = e
        finally:
            self.is_generating = False

        if not self.is_open:
            log.warning("Réponse IA reçue après fermeture du dialogue : ignorée")
            return None

        try:
            if error is not None:
                raise error
            block = self.editor.accept_candidate(candidate)
        except MalformedResponseError as e:
            log.error(f"Magic Build : {e}")
            self.alert(INVALID_RESPONSE_ALERT)
            return None
        except GenerationError as e:
            log.error(f"Magic Build : {e}")
            self.alert(GENERATION_FAILED_ALERT)
            return None

        self.prompt = ""
        self.is_open = False
        log.info("Magic Build : bloc %s ajouté (%s)", block.id, block.type)
        return block
