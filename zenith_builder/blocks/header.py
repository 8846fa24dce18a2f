"""Bloc Header — logo, liens de navigation, bouton et bascule de thème."""
from typing import List, Literal
from pydantic import Field
from .base import BlockContent, LinkItem

BLOCK_TYPE: Literal["header"] = "header"
LABEL = "Navigation Bar"


class HeaderContent(BlockContent):
    logoText: str = "Zenith"
    navLinks: List[LinkItem] = Field(default_factory=lambda: [
        LinkItem(text="Features"),
        LinkItem(text="Pricing"),
        LinkItem(text="About"),
    ])
    buttonText: str = "Sign Up"
    buttonUrl: str = "#"
    showThemeToggle: bool = True
