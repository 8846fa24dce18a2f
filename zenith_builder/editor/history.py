"""
Historique undo/redo — deux piles de snapshots complets de la liste de blocs.

Les blocs ne sont jamais modifiés en place (chaque mutation produit de nouveaux
objets Block), un snapshot peut donc partager ses blocs avec l'état courant.
"""
from typing import List, Optional, Sequence, Tuple

from ..blocks.base import Block

Snapshot = Tuple[Block, ...]


class History:
    def __init__(self):
        self.past: List[Snapshot] = []
        self.future: List[Snapshot] = []

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def push(self, blocks: Sequence[Block]) -> None:
        """Enregistre l'état avant mutation ; toute nouvelle mutation vide le redo."""
        self.past.append(tuple(blocks))
        self.future.clear()

    def undo(self, current: Sequence[Block]) -> Optional[List[Block]]:
        if not self.past:
            return None
        self.future.insert(0, tuple(current))
        return list(self.past.pop())

    def redo(self, current: Sequence[Block]) -> Optional[List[Block]]:
        if not self.future:
            return None
        self.past.append(tuple(current))
        return list(self.future.pop(0))

    def clear(self) -> None:
        self.past.clear()
        self.future.clear()
