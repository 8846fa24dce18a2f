"""Bloc Hero — titre, sous-titre, bouton optionnel, alignement."""
from typing import Literal
from .base import BlockContent

BLOCK_TYPE: Literal["hero"] = "hero"
LABEL = "Hero Section"


class HeroContent(BlockContent):
    heading: str = "Create with confidence."
    subheading: str = "A powerful builder for modern websites. Drag, drop, and deploy in minutes."
    buttonText: str = "Get Started"
    buttonUrl: str = "#"
    showButton: bool = True
    alignment: Literal["left", "center", "right"] = "center"
