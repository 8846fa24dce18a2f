"""Bloc Features — grille de cartes icône + titre + description."""
from typing import List, Literal
from pydantic import BaseModel, Field
from .base import BlockContent

BLOCK_TYPE: Literal["features"] = "features"
LABEL = "Features Grid"

# Icônes disponibles (noms lucide) ; inconnue → "layout"
ICON_NAMES = (
    "layout", "zap", "smartphone", "shield", "globe", "barChart", "smile", "star",
    "send", "mail", "play", "check", "penTool", "layers", "cpu",
)
DEFAULT_ICON = "layout"


class FeatureItem(BaseModel):
    title: str
    description: str
    icon: str = DEFAULT_ICON


class FeaturesContent(BlockContent):
    heading: str = "Why choose us"
    items: List[FeatureItem] = Field(default_factory=lambda: [
        FeatureItem(title="Fast Performance", description="Optimized for speed and efficiency.", icon="zap"),
        FeatureItem(title="Responsive Design", description="Looks great on every device automatically.", icon="smartphone"),
        FeatureItem(title="Secure & Reliable", description="Built with security best practices in mind.", icon="shield"),
    ])
