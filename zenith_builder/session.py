"""
Session d'édition — un éditeur en mémoire par instance d'application, rien n'est persisté.

Les routes qui la manipulent sont `async def` : toutes les mutations passent par le thread
de la boucle d'événements, jamais par le threadpool de FastAPI.
"""
from typing import Optional

from .editor.document import DocumentEditor
from .generator.ai import ContentGenerator
from .generator.dialog import MagicBuildDialog
from .renderer.interactive import Canvas


class EditorSession:
    def __init__(self, generator: Optional[ContentGenerator] = None):
        self.editor = DocumentEditor()
        self.canvas = Canvas(self.editor.commit_edit)
        self.editor.subscribe(self.canvas.sync)
        self.dialog = MagicBuildDialog(self.editor, generator or ContentGenerator())

    def state(self) -> dict:
        return {
            "blocks": self.editor.to_data(),
            "selectedId": self.editor.selected_id,
            "canUndo": self.editor.can_undo,
            "canRedo": self.editor.can_redo,
        }
