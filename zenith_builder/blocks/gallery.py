"""Bloc Gallery — grille d'images carrées."""
from typing import List, Literal
from pydantic import Field
from .base import BlockContent

BLOCK_TYPE: Literal["gallery"] = "gallery"
LABEL = "Image Gallery"


class GalleryContent(BlockContent):
    heading: str = "Our Work"
    images: List[str] = Field(default_factory=lambda: [
        f"https://picsum.photos/400/300?random={i}" for i in range(1, 5)
    ])
