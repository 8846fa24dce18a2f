"""
Blocs de base — Block (id + type + styles + content), StylePayload, ExtraElement.

Le content d'un Block reste un dict ouvert ; chaque variante déclare son modèle
de contenu (BlockContent) dont les valeurs par défaut servent de gabarit.
"""
import random
import string
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id() -> str:
    """Identifiant opaque, 9 caractères base 36."""
    return "".join(random.choices(_ID_ALPHABET, k=9))


class StylePayload(BaseModel):
    """Style d'un bloc. Attributs snake_case, alias camelCase (backgroundColor...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    padding_top: str = "0rem"
    padding_bottom: str = "0rem"
    margin_top: str = "0rem"
    margin_bottom: str = "0rem"
    background_color: str = "#ffffff"
    background_opacity: float = Field(default=1, ge=0, le=1)
    text_color: str = "#1a202c"
    background_image: Optional[str] = None
    gradient: Optional[str] = None
    background_size: Optional[Literal["cover", "contain", "auto"]] = "cover"
    background_repeat: Optional[Literal["no-repeat", "repeat", "repeat-x", "repeat-y"]] = "no-repeat"
    background_position: Optional[Literal["center", "top", "bottom", "left", "right"]] = "center"


DEFAULT_STYLES = StylePayload()


class ExtraElement(BaseModel):
    """Nœud libre ajouté par l'utilisateur après le gabarit de la variante."""
    model_config = ConfigDict(extra="allow")

    type: Literal["text", "button"] = "text"
    content: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None
    align: Literal["left", "center", "right"] = "center"


class BlockContent(BaseModel):
    """Contenu d'un bloc. Les valeurs par défaut de chaque sous-classe = contenu initial."""
    model_config = ConfigDict(extra="allow")

    elements: Optional[List[ExtraElement]] = None


class LinkItem(BaseModel):
    text: str
    url: str = "#"


class Block(BaseModel):
    """Instance de section sur la page."""
    id: str = Field(default_factory=generate_id)
    type: str
    styles: StylePayload = Field(default_factory=StylePayload)
    content: Dict[str, Any] = Field(default_factory=dict)


# alias camelCase → attribut snake_case (les deux formes sont acceptées en entrée)
_STYLE_ALIASES = {(f.alias or to_camel(name)): name for name, f in StylePayload.model_fields.items()}


def style_key(key: str) -> str:
    return _STYLE_ALIASES.get(key, key)
