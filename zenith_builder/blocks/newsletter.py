"""Bloc Newsletter — inscription email."""
from typing import Literal
from .base import BlockContent

BLOCK_TYPE: Literal["newsletter"] = "newsletter"
LABEL = "Newsletter"


class NewsletterContent(BlockContent):
    heading: str = "Stay Updated"
    subheading: str = "Subscribe to our newsletter for the latest tips and news."
    placeholder: str = "Enter your email"
    buttonText: str = "Subscribe"
