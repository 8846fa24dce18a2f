"""Bloc Image & Text — visuel + texte, image à gauche ou à droite."""
from typing import Literal
from .base import BlockContent

BLOCK_TYPE: Literal["image-text"] = "image-text"
LABEL = "Image & Text"


class ImageTextContent(BlockContent):
    heading: str = "Visual Impact"
    text: str = "Combine powerful imagery with compelling copy to engage your audience effectively."
    imageSrc: str = "https://picsum.photos/800/600"
    imagePosition: Literal["left", "right"] = "right"
    buttonText: str = "Learn More"
