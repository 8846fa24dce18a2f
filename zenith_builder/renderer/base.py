"""
Protocol Renderer — deux projections d'un même bloc (statique et interactive).
"""
from typing import Any, Protocol, runtime_checkable

from ..blocks.base import Block


@runtime_checkable
class Renderer(Protocol):
    def render_block(self, block: Block) -> Any: ...
