"""
Blocs — registry des 15 variantes, contenus par défaut, construction de blocs.
"""
import copy
from typing import Any, Dict, Optional, Type

from .base import (
    Block, BlockContent, StylePayload, ExtraElement, LinkItem,
    DEFAULT_STYLES, generate_id, style_key,
)
from . import (
    header, hero, features, testimonials, video, cta, contact, pricing,
    faq, footer, gallery, team, blog, newsletter, image_text,
)
from ..exceptions import UnknownBlockTypeError

# Ordre = ordre de la palette
_VARIANTS = (
    header, hero, features, testimonials, video, cta, contact, pricing,
    faq, footer, gallery, team, blog, newsletter, image_text,
)

CONTENT_MODELS: Dict[str, Type[BlockContent]] = {
    header.BLOCK_TYPE:       header.HeaderContent,
    hero.BLOCK_TYPE:         hero.HeroContent,
    features.BLOCK_TYPE:     features.FeaturesContent,
    testimonials.BLOCK_TYPE: testimonials.TestimonialsContent,
    video.BLOCK_TYPE:        video.VideoContent,
    cta.BLOCK_TYPE:          cta.CTAContent,
    contact.BLOCK_TYPE:      contact.ContactContent,
    pricing.BLOCK_TYPE:      pricing.PricingContent,
    faq.BLOCK_TYPE:          faq.FAQContent,
    footer.BLOCK_TYPE:       footer.FooterContent,
    gallery.BLOCK_TYPE:      gallery.GalleryContent,
    team.BLOCK_TYPE:         team.TeamContent,
    blog.BLOCK_TYPE:         blog.BlogContent,
    newsletter.BLOCK_TYPE:   newsletter.NewsletterContent,
    image_text.BLOCK_TYPE:   image_text.ImageTextContent,
}

BLOCK_TYPES = tuple(m.BLOCK_TYPE for m in _VARIANTS)
LABELS: Dict[str, str] = {m.BLOCK_TYPE: m.LABEL for m in _VARIANTS}


def is_known_type(block_type: Any) -> bool:
    return isinstance(block_type, str) and block_type in CONTENT_MODELS


def _content_model(block_type: str) -> Type[BlockContent]:
    model = CONTENT_MODELS.get(block_type) if isinstance(block_type, str) else None
    if model is None:
        raise UnknownBlockTypeError(block_type)
    return model


def default_content(block_type: str) -> dict:
    """Contenu par défaut d'une variante — copie neuve à chaque appel."""
    return _content_model(block_type)().model_dump(exclude_none=True)


def new_block(block_type: str) -> Block:
    """Bloc neuf depuis la palette : id frais, styles et contenu par défaut."""
    return Block(
        id=generate_id(),
        type=block_type,
        styles=DEFAULT_STYLES.model_copy(),
        content=default_content(block_type),
    )


def build_block(block_type: Any, content: Optional[dict] = None, styles: Optional[dict] = None) -> Block:
    """
    Construit un bloc depuis une forme externe (réponse IA).

    Le contenu candidat est fusionné (un niveau) sur le contenu par défaut de la
    variante puis validé par son modèle : toutes les clés lues par les renderers existent.

    Raises:
        UnknownBlockTypeError: type absent ou inconnu
        pydantic.ValidationError: contenu ou styles mal formés
    """
    model = _content_model(block_type)
    merged = {**default_content(block_type), **copy.deepcopy(content or {})}
    validated = model.model_validate(merged)

    style_data = DEFAULT_STYLES.model_dump()
    style_data.update({style_key(k): v for k, v in (styles or {}).items()})

    return Block(
        id=generate_id(),
        type=block_type,
        styles=StylePayload.model_validate(style_data),
        content=validated.model_dump(exclude_none=True),
    )


def catalog() -> list:
    """Catalogue des blocs : type, libellé palette, JSON schema du contenu."""
    return [
        {
            "type": block_type,
            "label": LABELS[block_type],
            "schema": CONTENT_MODELS[block_type].model_json_schema(),
        }
        for block_type in BLOCK_TYPES
    ]


__all__ = [
    "Block", "BlockContent", "StylePayload", "ExtraElement", "LinkItem",
    "DEFAULT_STYLES", "generate_id",
    "CONTENT_MODELS", "BLOCK_TYPES", "LABELS",
    "is_known_type", "default_content", "new_block", "build_block", "catalog",
]
