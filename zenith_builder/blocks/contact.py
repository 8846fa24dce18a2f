"""Bloc Contact — texte + formulaire email/message."""
from typing import Literal
from .base import BlockContent

BLOCK_TYPE: Literal["contact"] = "contact"
LABEL = "Contact Form"


class ContactContent(BlockContent):
    heading: str = "Get in touch"
    subheading: str = "We’d love to hear from you. Fill out the form below."
    buttonText: str = "Send Message"
    emailPlaceholder: str = "you@example.com"
    messagePlaceholder: str = "Your message..."
