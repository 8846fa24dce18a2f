"""
Panneau de propriétés — actions rapides sur le bloc sélectionné.

Chaque action passe par update_styles / update_content : une action = une entrée d'historique.
"""
from typing import Literal, NamedTuple, Optional

from ..blocks.base import Block
from .document import DocumentEditor


class Palette(NamedTuple):
    name: str
    bg: str
    text: str


PALETTES = (
    Palette("Clean", "#ffffff", "#1a202c"),
    Palette("Dark",  "#111827", "#f9fafb"),
    Palette("Ocean", "#eff6ff", "#1e3a8a"),
    Palette("Rose",  "#fff1f2", "#881337"),
    Palette("Slate", "#f8fafc", "#334155"),
    Palette("Teal",  "#f0fdfa", "#134e4a"),
)

# Dégradés prédéfinis pour les fonds clair / sombre par défaut
_GRADIENT_PRESETS = {
    "#ffffff": "linear-gradient(135deg, #ffffff 0%, #f3f4f6 100%)",
    "#111827": "linear-gradient(135deg, #111827 0%, #1f2937 100%)",
}


def palette(name: str) -> Palette:
    for p in PALETTES:
        if p.name == name:
            return p
    raise KeyError(f"Palette inconnue : {name!r}")


def subtle_gradient(background_color: str) -> str:
    return _GRADIENT_PRESETS.get(
        background_color,
        f"linear-gradient(135deg, {background_color} 0%, rgba(255,255,255,0) 100%)",
    )


# ── Style ────────────────────────────────────────────────────────────────────

def apply_palette(editor: DocumentEditor, block_id: str, name: str) -> Optional[Block]:
    """Fond + texte de la palette ; supprime un éventuel dégradé."""
    p = palette(name)
    return editor.update_styles(block_id, {"backgroundColor": p.bg, "textColor": p.text, "gradient": None})


def toggle_gradient(editor: DocumentEditor, block_id: str, on: bool) -> Optional[Block]:
    block = editor.get(block_id)
    if block is None:
        return None
    gradient = subtle_gradient(block.styles.background_color) if on else None
    return editor.update_styles(block_id, {"gradient": gradient})


# ── Éléments libres ──────────────────────────────────────────────────────────

def add_element(editor: DocumentEditor, block_id: str, kind: Literal["text", "button"]) -> Optional[Block]:
    block = editor.get(block_id)
    if block is None:
        return None
    if kind == "text":
        element = {"type": "text", "content": "New Text Block", "align": "center"}
    elif kind == "button":
        element = {"type": "button", "text": "New Button", "url": "#", "align": "center"}
    else:
        raise ValueError(f"Type d'élément inconnu : {kind!r}")
    elements = list(block.content.get("elements") or [])
    return editor.update_content(block_id, {"elements": elements + [element]})


def remove_element(editor: DocumentEditor, block_id: str, index: int) -> Optional[Block]:
    block = editor.get(block_id)
    if block is None:
        return None
    elements = [e for i, e in enumerate(block.content.get("elements") or []) if i != index]
    return editor.update_content(block_id, {"elements": elements})


def align_element(editor: DocumentEditor, block_id: str, index: int,
                  align: Literal["left", "center", "right"]) -> Optional[Block]:
    return editor.update_item(block_id, "elements", index, "align", align)


def update_item(editor: DocumentEditor, block_id: str, field: str, index: int,
                item_field: str, value) -> Optional[Block]:
    """Champ d'un élément de liste (plans, items, members...)."""
    return editor.update_item(block_id, field, index, item_field, value)
