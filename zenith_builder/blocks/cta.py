"""Bloc CTA — appel à l'action centré."""
from typing import Literal
from .base import BlockContent

BLOCK_TYPE: Literal["cta"] = "cta"
LABEL = "Call to Action"


class CTAContent(BlockContent):
    heading: str = "Ready to dive in?"
    subheading: str = "Join the community and start building today."
    buttonText: str = "Start Free Trial"
