"""
Export — document HTML autonome et copie presse-papier d'un bloc.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from . import config
from .blocks.base import Block
from .renderer.html import render_clipboard, render_page

log = logging.getLogger(__name__)


def export_page(blocks: Iterable[Block], title: str = "Exported Page") -> str:
    """Même liste de blocs → mêmes octets. Les blocs de type inconnu sont ignorés."""
    return render_page(list(blocks), title)


def write_export(blocks: Iterable[Block], path: Optional[Union[str, Path]] = None,
                 title: str = "Exported Page") -> Path:
    """Écrit l'export en UTF-8 (défaut : ZENITH_EXPORT_FILENAME dans le répertoire courant)."""
    blocks = list(blocks)
    target = Path(path) if path is not None else Path(config.EXPORT_FILENAME)
    target.write_text(export_page(blocks, title), encoding="utf-8")
    log.info("Export : %d bloc(s) → %s", len(blocks), target)
    return target


def copy_block_html(block: Block) -> str:
    """Section unique avec style inline, même générateur que l'export."""
    return render_clipboard(block)
