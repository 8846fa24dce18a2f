"""
Arbre de nœuds commun aux deux rendus (statique et interactif).

Chaque gabarit de variante produit un arbre de Node ; le rendu statique le sérialise
en HTML, le rendu interactif l'expose avec des poignées d'édition sur les nœuds liés
(`bind`) à un champ du contenu.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

VOID_TAGS = frozenset({"img", "input", "br", "hr", "meta", "link"})


@dataclass(frozen=True)
class FieldRef:
    """
    Adresse d'un champ éditable dans le contenu d'un bloc.

    heading               → FieldRef("heading")
    plans[1].price        → FieldRef("plans", 1, "price")
    elements[0].content   → FieldRef("elements", 0, "content")
    """
    field: str
    index: Optional[int] = None
    item_field: Optional[str] = None

    @property
    def path(self) -> str:
        if self.index is None:
            return self.field
        return f"{self.field}.{self.index}.{self.item_field}"

    @classmethod
    def parse(cls, path: str) -> "FieldRef":
        parts = path.split(".")
        if len(parts) == 1 and parts[0]:
            return cls(parts[0])
        if len(parts) == 3 and parts[1].isdigit() and parts[0] and parts[2]:
            return cls(parts[0], int(parts[1]), parts[2])
        raise ValueError(f"Chemin de champ invalide : {path!r}")


@dataclass
class Node:
    tag: str
    classes: str = ""
    text: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    bind: Optional[FieldRef] = None
    placeholder: Optional[str] = None

    def walk(self) -> Iterator["Node"]:
        """Parcours préfixe (ordre du document)."""
        yield self
        for child in self.children:
            yield from child.walk()

    def texts(self) -> List[str]:
        """Textes visibles, dans l'ordre du document."""
        return [n.text for n in self.walk() if n.text]

    def editables(self) -> List["Node"]:
        return [n for n in self.walk() if n.bind is not None]


# ── Constructeurs courts pour les gabarits ───────────────────────────────────

def el(tag: str, classes: str = "", *children: Node, **attrs: str) -> Node:
    return Node(tag, classes, attrs=_attrs(attrs), children=list(children))


def txt(tag: str, classes: str, value, **attrs: str) -> Node:
    """Texte fixe (non éditable)."""
    return Node(tag, classes, text=_str(value), attrs=_attrs(attrs))


def editable(tag: str, classes: str, value, ref: FieldRef, placeholder: Optional[str] = None, **attrs: str) -> Node:
    """Texte lié à un champ du contenu : éditable dans le rendu interactif."""
    return Node(tag, classes, text=_str(value), attrs=_attrs(attrs), bind=ref, placeholder=placeholder)


def _str(value) -> str:
    return "" if value is None else str(value)


def _attrs(attrs: dict) -> Dict[str, str]:
    # class_ / data_x → class / data-x
    return {k.rstrip("_").replace("_", "-"): _str(v) for k, v in attrs.items()}
