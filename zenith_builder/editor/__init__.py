"""
Éditeur de document — liste de blocs, sélection, historique, actions du panneau de propriétés.
"""
from .history import History
from .document import DocumentEditor
from . import properties

__all__ = ["History", "DocumentEditor", "properties"]
