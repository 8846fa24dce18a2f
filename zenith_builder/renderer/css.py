"""
Résolution des styles d'un bloc → propriétés CSS.

Une seule table résolue, deux sérialisations :
  resolve(styles)        →  {"padding-top": "0rem", "background-color": "rgba(...)", ...}
  style_string(props)    →  attribut style="..." (export, copie presse-papier)
  style_object(props)    →  objet style camelCase (rendu interactif)
"""
import re
from typing import Dict, Optional, Tuple

from ..blocks.base import StylePayload

_HEX = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)


def hex_to_rgb(value: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """"#3366ff" / "#36f" → (51, 102, 255). Toute autre forme → None (jamais d'exception)."""
    if not isinstance(value, str):
        return None
    m = _HEX.match(value.strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _opacity(value: float) -> str:
    """Opacité sans perte de précision : 1.0 → "1", 0.123456789 → "0.123456789"."""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def background_color(styles: StylePayload) -> str:
    """Couleur de fond avec opacité ; couleur non hex → passée telle quelle, sans opacité."""
    rgb = hex_to_rgb(styles.background_color)
    if rgb is None:
        return styles.background_color
    r, g, b = rgb
    return f"rgba({r},{g},{b},{_opacity(styles.background_opacity)})"


def resolve(styles: StylePayload) -> Dict[str, str]:
    """
    Propriétés de présentation d'un bloc, dans un ordre stable.

    Précédence du fond : gradient > image > couleur. Avec un gradient, seule la
    propriété `background` est émise (couleur et image ignorées).
    """
    props: Dict[str, str] = {
        "padding-top":    styles.padding_top,
        "padding-bottom": styles.padding_bottom,
        "margin-top":     styles.margin_top,
        "margin-bottom":  styles.margin_bottom,
    }

    if styles.gradient:
        props["background"] = styles.gradient
    else:
        props["background-color"] = background_color(styles)
        if styles.background_image:
            props["background-image"] = f"url({styles.background_image})"

    props["color"] = styles.text_color

    for name, value in (
        ("background-size",     styles.background_size),
        ("background-repeat",   styles.background_repeat),
        ("background-position", styles.background_position),
    ):
        if value:
            props[name] = value
    return props


def style_string(props: Dict[str, str]) -> str:
    return "; ".join(f"{name}: {value}" for name, value in props.items())


def _camel(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(part.capitalize() for part in rest)


def style_object(props: Dict[str, str]) -> Dict[str, str]:
    return {_camel(name): value for name, value in props.items()}


def block_style_string(styles: StylePayload) -> str:
    """Raccourci export : resolve() puis style_string()."""
    return style_string(resolve(styles))
