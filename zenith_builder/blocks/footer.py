"""Bloc Footer — copyright + liens."""
from typing import List, Literal
from pydantic import Field
from .base import BlockContent, LinkItem

BLOCK_TYPE: Literal["footer"] = "footer"
LABEL = "Footer"
BRAND = "Zenith"


class FooterContent(BlockContent):
    copyright: str = "© 2024 Zenith Builder."
    links: List[LinkItem] = Field(default_factory=lambda: [
        LinkItem(text="Privacy Policy"),
        LinkItem(text="Terms of Service"),
        LinkItem(text="Contact"),
    ])
