"""
Renderer HTML statique — export de page et copie presse-papier.

Sérialise l'arbre de Node issu des gabarits (templates.build_tree). Sortie
déterministe : même liste de blocs → mêmes octets.
"""
import html
from typing import Callable, Dict, Iterable, Optional

from .. import config
from ..blocks.base import Block
from .css import block_style_string
from .nodes import Node, VOID_TAGS
from .templates import build_tree

AttrHook = Callable[[Node], Dict[str, str]]

_BASE_CSS = """      body { margin: 0; font-family: system-ui, -apple-system, sans-serif; }
      html { scroll-behavior: smooth; }"""


# ── Sérialisation Node → HTML ───────────────────────────────────────────────

def _render_attrs(node: Node, hook: Optional[AttrHook]) -> str:
    attrs: Dict[str, str] = {}
    if node.classes:
        attrs["class"] = node.classes
    attrs.update(node.attrs)
    if hook is not None:
        attrs.update(hook(node))
    return "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in attrs.items())


def serialize(node: Node, depth: int = 0, hook: Optional[AttrHook] = None) -> str:
    """
    Node → HTML indenté (2 espaces). Texte échappé, attributs échappés.
    `hook` ajoute des attributs par nœud (utilisé par le rendu interactif).
    """
    pad = "  " * depth
    open_tag = f"<{node.tag}{_render_attrs(node, hook)}>"
    if node.tag in VOID_TAGS:
        return pad + open_tag
    text = html.escape(node.text, quote=False) if node.text else ""
    if not node.children:
        return f"{pad}{open_tag}{text}</{node.tag}>"
    inner = "\n".join(serialize(child, depth + 1, hook) for child in node.children)
    return f"{pad}{open_tag}{text}\n{inner}\n{pad}</{node.tag}>"


# ── Bloc ────────────────────────────────────────────────────────────────────

def render_block(block: Block, depth: int = 0) -> str:
    """HTML statique d'un bloc. Type inconnu → chaîne vide (bloc ignoré à l'export)."""
    tree = build_tree(block.type, block.content, mobile=False)
    if tree is None:
        return ""
    return serialize(tree, depth)


def render_section(block: Block) -> str:
    """Section d'export : commentaire + <section> avec id, type et style inline."""
    inner = render_block(block, depth=2)
    if not inner:
        return ""
    style = html.escape(block_style_string(block.styles), quote=True)
    block_id = html.escape(block.id, quote=True)
    block_type = html.escape(block.type, quote=True)
    return (
        f"  <!-- Block: {block_type} -->\n"
        f'  <section id="{block_id}" data-block-type="{block_type}" style="{style}">\n'
        f"{inner}\n"
        f"  </section>"
    )


def render_clipboard(block: Block) -> str:
    """Copie d'un bloc seul : même générateur que l'export."""
    style = html.escape(block_style_string(block.styles), quote=True)
    return f'<section style="{style}">\n{render_block(block)}\n</section>'


# ── Page ────────────────────────────────────────────────────────────────────

def render_page(blocks: Iterable[Block], title: str = "Exported Page") -> str:
    """Document HTML autonome : doctype, head (CDN Tailwind), une section par bloc rendable."""
    sections = [s for s in (render_section(b) for b in blocks) if s]
    body = "\n".join(sections)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title, quote=False)}</title>
    <script src="{config.TAILWIND_CDN}"></script>
    <style>
{_BASE_CSS}
    </style>
</head>
<body>
{body}
</body>
</html>
"""


class StaticRenderer:
    """Renderer d'export (conforme au Protocol Renderer)."""

    def __init__(self, title: str = "Exported Page"):
        self.title = title

    def render_block(self, block: Block) -> str:
        return render_section(block)

    def render_page(self, blocks: Iterable[Block]) -> str:
        return render_page(blocks, self.title)
