"""
Renderers — arbre de nœuds partagé, projection statique (export) et interactive (canvas).
"""
from .base import Renderer
from .css import hex_to_rgb, resolve, style_string, style_object, block_style_string
from .nodes import FieldRef, Node
from .templates import TEMPLATES, build_tree, align_class
from .html import StaticRenderer, serialize, render_block, render_section, render_clipboard, render_page
from .interactive import InteractiveRenderer, BlockView, Canvas, EditableText, render_properties, render_workspace

__all__ = [
    "Renderer", "StaticRenderer", "InteractiveRenderer",
    "hex_to_rgb", "resolve", "style_string", "style_object", "block_style_string",
    "FieldRef", "Node", "TEMPLATES", "build_tree", "align_class",
    "serialize", "render_block", "render_section", "render_clipboard", "render_page",
    "BlockView", "Canvas", "EditableText", "render_workspace",
]
