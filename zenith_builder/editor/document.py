"""
DocumentEditor — seul propriétaire de la liste de blocs, de la sélection et de l'historique.

Chaque mutation :
  1. construit une nouvelle liste (les Block modifiés sont des copies),
  2. pousse la liste précédente dans l'historique (le redo est vidé),
  3. notifie les abonnés (Canvas.sync).

Les blocs ne sont jamais modifiés en place.
"""
import copy
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..blocks import build_block, new_block
from ..blocks.base import Block, StylePayload, style_key
from ..exceptions import MalformedResponseError, UnknownBlockTypeError
from ..renderer.nodes import FieldRef
from .history import History

log = logging.getLogger(__name__)

Listener = Callable[[List[Block]], None]


class DocumentEditor:
    """État d'édition d'une session : blocs, sélection, undo/redo."""

    def __init__(self, blocks: Optional[List[Block]] = None):
        self._blocks: List[Block] = list(blocks or [])
        self.selected_id: Optional[str] = None
        self.history = History()
        self._listeners: List[Listener] = []

    # ── Lecture ──────────────────────────────────────────────────────────────

    @property
    def blocks(self) -> List[Block]:
        return list(self._blocks)

    def index_of(self, block_id: str) -> Optional[int]:
        for i, block in enumerate(self._blocks):
            if block.id == block_id:
                return i
        return None

    def get(self, block_id: Optional[str]) -> Optional[Block]:
        i = self.index_of(block_id) if block_id else None
        return None if i is None else self._blocks[i]

    @property
    def selected_block(self) -> Optional[Block]:
        """Bloc sélectionné ; None si aucune sélection ou id disparu."""
        return self.get(self.selected_id)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # ── Abonnements ──────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)
        listener(self.blocks)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.blocks)

    def _commit(self, blocks: List[Block], action: str) -> None:
        self.history.push(self._blocks)
        self._blocks = blocks
        log.debug("%s → %d bloc(s)", action, len(blocks))
        self._notify()

    # ── Sélection ────────────────────────────────────────────────────────────

    def select(self, block_id: Optional[str]) -> None:
        """Un id inexistant est accepté : aucun bloc sélectionné n'en résulte."""
        self.selected_id = block_id

    # ── Mutations ────────────────────────────────────────────────────────────

    def insert(self, block_type: str, index: Optional[int] = None) -> Block:
        """
        Insère un bloc neuf (contenu et styles par défaut) et le sélectionne.
        index None ou au-delà de la fin → ajout en fin de liste.

        Raises:
            UnknownBlockTypeError: type hors des 15 variantes
            IndexError: index négatif
        """
        if index is not None and index < 0:
            raise IndexError(f"insert à l'index {index} : index négatif")
        block = new_block(block_type)
        blocks = list(self._blocks)
        if index is None or index >= len(blocks):
            blocks.append(block)
        else:
            blocks.insert(index, block)
        self._commit(blocks, f"insert {block_type}")
        self.selected_id = block.id
        return block

    def reorder(self, from_index: int, to_index: int) -> None:
        """Déplace un bloc ; les autres gardent leur ordre relatif. Même index → rien."""
        n = len(self._blocks)
        if not (0 <= from_index < n and 0 <= to_index < n):
            raise IndexError(f"reorder({from_index}, {to_index}) hors limites (n={n})")
        if from_index == to_index:
            return
        blocks = list(self._blocks)
        moved = blocks.pop(from_index)
        blocks.insert(to_index, moved)
        self._commit(blocks, f"reorder {from_index}→{to_index}")

    def delete(self, block_id: str) -> bool:
        if self.index_of(block_id) is None:
            return False
        blocks = [b for b in self._blocks if b.id != block_id]
        self._commit(blocks, f"delete {block_id}")
        if self.selected_id == block_id:
            self.selected_id = None
        return True

    def _replace(self, block: Block, action: str) -> Block:
        blocks = [block if b.id == block.id else b for b in self._blocks]
        self._commit(blocks, action)
        return block

    def update_styles(self, block_id: str, partial: Mapping[str, Any]) -> Optional[Block]:
        """
        Fusion (un niveau) de styles partiels. Clés camelCase ou snake_case.
        Id inconnu ou styles inchangés → rien n'est enregistré.

        Raises:
            pydantic.ValidationError: valeur hors contraintes (opacité, énumérations)
        """
        block = self.get(block_id)
        if block is None:
            return None
        data = block.styles.model_dump()
        data.update({style_key(k): v for k, v in partial.items()})
        styles = StylePayload.model_validate(data)
        if styles == block.styles:
            return block
        return self._replace(block.model_copy(update={"styles": styles}), f"styles {block_id}")

    def update_content(self, block_id: str, partial: Mapping[str, Any]) -> Optional[Block]:
        """
        Fusion (un niveau) de contenu partiel : les listes sont remplacées en bloc.
        Id inconnu → None ; contenu inchangé → bloc courant. Rien n'est enregistré dans les deux cas.
        """
        block = self.get(block_id)
        if block is None:
            return None
        content = {**block.content, **copy.deepcopy(dict(partial))}
        if content == block.content:
            return block
        return self._replace(block.model_copy(update={"content": content}), f"content {block_id}")

    def commit_edit(self, block_id: str, ref: Union[FieldRef, str], value: str) -> Optional[Block]:
        """Validation d'un texte édité (blur) : champ simple ou champ d'un élément de liste."""
        if isinstance(ref, str):
            ref = FieldRef.parse(ref)
        block = self.get(block_id)
        if block is None:
            return None
        if ref.index is None:
            return self.update_content(block_id, {ref.field: value})
        return self.update_item(block_id, ref.field, ref.index, ref.item_field, value)

    def update_item(self, block_id: str, field: str, index: int, item_field: str, value: Any) -> Optional[Block]:
        """Remplace un champ d'un élément de liste (copie de la liste puis de l'élément)."""
        block = self.get(block_id)
        if block is None:
            return None
        items = list(block.content.get(field) or [])
        if not 0 <= index < len(items):
            log.warning("update_item ignoré : %s[%d] absent du bloc %s", field, index, block_id)
            return None
        item = items[index]
        items[index] = {**item, item_field: value} if isinstance(item, dict) else value
        return self.update_content(block_id, {field: items})

    def handle_drop(self, transfer: Mapping[str, Any], index: Optional[int] = None) -> Optional[Block]:
        """
        Protocole de drag : `blockType` → insertion (à index, sinon en fin) ;
        sinon `dragIndex` + index cible → déplacement.
        """
        block_type = transfer.get("blockType")
        if block_type:
            return self.insert(block_type, index)
        drag_index = transfer.get("dragIndex")
        if drag_index is not None and index is not None and int(drag_index) != index:
            self.reorder(int(drag_index), index)
        return None

    def accept_candidate(self, candidate: Any) -> Block:
        """
        Insère en fin de liste un bloc proposé par le générateur, après fusion sur le
        contenu par défaut de sa variante. Le document n'est pas modifié en cas d'erreur.

        Raises:
            MalformedResponseError: forme invalide, type absent ou inconnu, contenu invalide
        """
        if not isinstance(candidate, dict):
            raise MalformedResponseError("Réponse IA : objet JSON attendu")
        content = candidate.get("content")
        styles = candidate.get("styles")
        if content is not None and not isinstance(content, dict):
            raise MalformedResponseError("Réponse IA : 'content' doit être un objet")
        if styles is not None and not isinstance(styles, dict):
            raise MalformedResponseError("Réponse IA : 'styles' doit être un objet")
        try:
            block = build_block(candidate.get("type"), content, styles)
        except UnknownBlockTypeError as e:
            raise MalformedResponseError(str(e)) from e
        except ValidationError as e:
            raise MalformedResponseError(f"Réponse IA invalide : {e.error_count()} erreur(s)") from e

        self._commit(self._blocks + [block], f"generate {block.type}")
        self.selected_id = block.id
        return block

    # ── Historique ───────────────────────────────────────────────────────────

    def undo(self) -> bool:
        previous = self.history.undo(self._blocks)
        if previous is None:
            return False
        self._blocks = previous
        log.debug("undo → %d bloc(s)", len(previous))
        self._notify()
        return True

    def redo(self) -> bool:
        following = self.history.redo(self._blocks)
        if following is None:
            return False
        self._blocks = following
        log.debug("redo → %d bloc(s)", len(following))
        self._notify()
        return True

    def to_data(self) -> List[Dict[str, Any]]:
        """Liste de blocs sérialisable (styles en camelCase)."""
        return [b.model_dump(by_alias=True) for b in self._blocks]
