"""
Zenith Builder — éditeur de pages par blocs, avec export HTML statique.

Usage :
    >>> from zenith_builder import DocumentEditor, export_page
    >>> editor = DocumentEditor()
    >>> block = editor.insert("pricing")
    >>> editor.commit_edit(block.id, "plans.1.price", "$49")
    >>> html = export_page(editor.blocks)
"""
from .blocks import (
    Block, StylePayload, ExtraElement, DEFAULT_STYLES,
    BLOCK_TYPES, CONTENT_MODELS, LABELS,
    default_content, new_block, build_block, catalog,
)
from .editor import DocumentEditor, History
from .export import export_page, write_export, copy_block_html
from .generator import ContentGenerator, MagicBuildDialog
from .renderer import (
    resolve, style_string, style_object, build_tree,
    StaticRenderer, InteractiveRenderer, Canvas, BlockView, EditableText,
)
from .exceptions import (
    BuilderError, UnknownBlockTypeError,
    GenerationError, MalformedResponseError, GenerationUnavailableError,
)

__version__ = "1.0.0"

__all__ = [
    "Block", "StylePayload", "ExtraElement", "DEFAULT_STYLES",
    "BLOCK_TYPES", "CONTENT_MODELS", "LABELS",
    "default_content", "new_block", "build_block", "catalog",
    "DocumentEditor", "History",
    "export_page", "write_export", "copy_block_html",
    "ContentGenerator", "MagicBuildDialog",
    "resolve", "style_string", "style_object", "build_tree",
    "StaticRenderer", "InteractiveRenderer", "Canvas", "BlockView", "EditableText",
    "BuilderError", "UnknownBlockTypeError",
    "GenerationError", "MalformedResponseError", "GenerationUnavailableError",
]
