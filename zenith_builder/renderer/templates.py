"""
Gabarits des 15 variantes → arbre de Node.

Source unique des deux rendus : le HTML statique (export) et la projection
interactive sont dérivés du même arbre, ils ne peuvent pas diverger.
`mobile=True` simule l'affichage mobile (classes responsive remplacées).
"""
from typing import Any, Callable, Dict, List, Optional

from ..blocks.features import ICON_NAMES, DEFAULT_ICON
from ..blocks.footer import BRAND
from .nodes import FieldRef, Node, el, txt, editable

ALIGN_CLASSES = {"center": "text-center", "right": "text-right"}

_BTN_PRIMARY = "bg-blue-600 text-white rounded-full font-medium hover:bg-blue-700 transition"


def align_class(align: Any) -> str:
    return ALIGN_CLASSES.get(align, "text-left")


# ── Accès tolérant au contenu (dict ouvert) ─────────────────────────────────

def _list(content: dict, key: str) -> list:
    value = content.get(key)
    return value if isinstance(value, list) else []


def _get(item: Any, key: str) -> Any:
    return item.get(key, "") if isinstance(item, dict) else ""


def _r(mobile: bool, mobile_cls: str, desktop_cls: str) -> str:
    return mobile_cls if mobile else desktop_cls


def _grid3(mobile: bool) -> str:
    return _r(mobile, "grid-cols-1", "grid-cols-1 md:grid-cols-3")


def _grid4(mobile: bool) -> str:
    return _r(mobile, "grid-cols-2", "grid-cols-2 md:grid-cols-4")


def _heading(c: dict, tag: str, classes: str) -> Node:
    return editable(tag, classes, c.get("heading"), FieldRef("heading"))


def _centered_heading(c: dict, margin: str = "mb-16", classes: str = "text-3xl font-bold") -> Node:
    return el("div", f"text-center {margin}", _heading(c, "h2", classes))


# ── Gabarits ────────────────────────────────────────────────────────────────

def _header(c: dict, mobile: bool) -> Node:
    nav = el("nav", f"gap-8 items-center {_r(mobile, 'hidden', 'hidden md:flex')}")
    for i, link in enumerate(_list(c, "navLinks")):
        nav.children.append(editable(
            "a", "font-medium hover:text-blue-600 transition-colors",
            _get(link, "text"), FieldRef("navLinks", i, "text"),
            href=_get(link, "url") or "#",
        ))
    if c.get("showThemeToggle"):
        nav.children.append(el(
            "div", "w-10 h-10 rounded-full bg-gray-100 flex items-center justify-center cursor-pointer hover:bg-gray-200 transition",
            el("span", "w-4 h-4 rounded-full bg-gray-400"),
        ))
    nav.children.append(el(
        "a", f"{_BTN_PRIMARY} px-5 py-2.5 shadow-md",
        editable("span", "", c.get("buttonText"), FieldRef("buttonText")),
        href=c.get("buttonUrl") or "#",
    ))
    return el(
        "div", "container mx-auto px-6 flex items-center justify-between flex-wrap gap-4 md:gap-0",
        editable("h2", "text-2xl font-bold tracking-tight", c.get("logoText"), FieldRef("logoText")),
        nav,
        txt("div", _r(mobile, "text-2xl cursor-pointer", "text-2xl cursor-pointer md:hidden"), "☰"),
    )


def _hero(c: dict, mobile: bool) -> Node:
    alignment = c.get("alignment")
    if alignment == "center":
        align = "text-center items-center"
    elif alignment == "right":
        align = "text-right items-end"
    else:
        align = "text-left items-start"

    root = el(
        "div", f"container mx-auto px-6 flex flex-col gap-6 py-12 md:py-20 {align}",
        editable("h1", "text-5xl md:text-7xl font-extrabold tracking-tight leading-[1.1]",
                 c.get("heading"), FieldRef("heading"), placeholder="Enter Heading"),
        editable("p", "text-xl md:text-2xl opacity-70 max-w-2xl leading-relaxed",
                 c.get("subheading"), FieldRef("subheading"), placeholder="Enter Subheading"),
    )
    if c.get("showButton"):
        root.children.append(el(
            "div", "mt-6",
            el("a", "inline-block bg-blue-600 text-white px-8 py-4 rounded-full text-lg font-bold hover:bg-blue-700 transition shadow-xl",
               editable("span", "", c.get("buttonText"), FieldRef("buttonText")),
               href=c.get("buttonUrl") or "#"),
        ))
    return root


def _features(c: dict, mobile: bool) -> Node:
    grid = el("div", f"grid gap-8 {_grid3(mobile)}")
    for i, item in enumerate(_list(c, "items")):
        icon = _get(item, "icon")
        grid.children.append(el(
            "div", "p-8 rounded-2xl border border-gray-100 bg-white/50 shadow-sm",
            el("div", "w-14 h-14 bg-blue-50 text-blue-600 rounded-xl flex items-center justify-center mb-6",
               el("i", "", data_lucide=icon if icon in ICON_NAMES else DEFAULT_ICON)),
            editable("h3", "text-xl font-bold mb-3", _get(item, "title"), FieldRef("items", i, "title")),
            editable("p", "text-gray-600 leading-relaxed", _get(item, "description"), FieldRef("items", i, "description")),
        ))
    return el(
        "div", "container mx-auto px-6",
        _centered_heading(c, classes="text-3xl md:text-4xl font-bold mb-4"),
        grid,
    )


def _testimonials(c: dict, mobile: bool) -> Node:
    grid = el("div", f"grid gap-8 {_grid3(mobile)}")
    for i, item in enumerate(_list(c, "items")):
        grid.children.append(el(
            "div", "bg-gray-50/80 p-8 rounded-2xl relative",
            el("div", "text-yellow-400 mb-4 flex gap-1", *[txt("span", "", "★") for _ in range(5)]),
            editable("p", "text-lg italic text-gray-700 mb-6", _get(item, "quote"), FieldRef("items", i, "quote")),
            el("div", "flex items-center gap-3",
               el("div", "w-10 h-10 rounded-full bg-gray-300"),
               el("div", "",
                  editable("p", "font-bold text-sm", _get(item, "author"), FieldRef("items", i, "author")),
                  editable("p", "text-xs text-gray-500 uppercase tracking-wide", _get(item, "role"), FieldRef("items", i, "role")))),
        ))
    return el(
        "div", "container mx-auto px-6",
        _centered_heading(c, classes="text-3xl md:text-4xl font-bold"),
        grid,
    )


def _video(c: dict, mobile: bool) -> Node:
    return el(
        "div", "container mx-auto px-6 text-center",
        _heading(c, "h2", "text-3xl md:text-4xl font-bold mb-8"),
        el("div", "relative w-full max-w-4xl mx-auto aspect-video rounded-2xl overflow-hidden shadow-2xl bg-black",
           el("iframe", "w-full h-full",
              src=c.get("videoUrl") or "",
              title="Video player",
              frameborder="0",
              allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture",
              allowfullscreen="")),
        editable("p", "mt-8 text-xl opacity-70 max-w-2xl mx-auto", c.get("description"), FieldRef("description")),
    )


def _cta(c: dict, mobile: bool) -> Node:
    return el(
        "div", "container mx-auto px-6 text-center",
        _heading(c, "h2", "text-3xl md:text-5xl font-bold mb-6"),
        editable("p", "text-xl opacity-80 mb-10 max-w-2xl mx-auto", c.get("subheading"), FieldRef("subheading")),
        el("button", "bg-white text-blue-900 px-10 py-4 rounded-full font-bold shadow-xl transition duration-200 text-lg",
           editable("span", "", c.get("buttonText"), FieldRef("buttonText"))),
    )


def _contact(c: dict, mobile: bool) -> Node:
    field_cls = "w-full px-4 py-3 rounded-xl border border-gray-200"
    label_cls = "block text-sm font-medium text-gray-700 mb-1"
    intro = el(
        "div", "",
        _heading(c, "h2", "text-4xl font-bold mb-6"),
        editable("p", "text-xl text-gray-600 mb-8", c.get("subheading"), FieldRef("subheading")),
        el("div", "flex items-center gap-4 text-gray-600",
           el("div", "w-10 h-10 rounded-full bg-blue-50 flex items-center justify-center text-blue-600",
              el("i", "", data_lucide="mail")),
           txt("span", "", "contact@example.com")),
    )
    form = el(
        "form", "bg-white p-8 rounded-3xl shadow-lg border border-gray-100 space-y-4",
        el("div", "", txt("label", label_cls, "Email Address"),
           el("input", field_cls, type="email", placeholder=c.get("emailPlaceholder") or "")),
        el("div", "", txt("label", label_cls, "Message"),
           el("textarea", field_cls, rows="4", placeholder=c.get("messagePlaceholder") or "")),
        el("button", "w-full py-4 bg-blue-600 text-white rounded-xl font-bold hover:bg-blue-700 transition",
           editable("span", "", c.get("buttonText"), FieldRef("buttonText"))),
    )
    return el(
        "div", "container mx-auto px-6",
        el("div", f"grid gap-12 items-center {_r(mobile, 'grid-cols-1', 'grid-cols-1 md:grid-cols-2')}", intro, form),
    )


def _pricing(c: dict, mobile: bool) -> Node:
    grid = el("div", f"grid gap-8 max-w-6xl mx-auto {_grid3(mobile)}")
    for i, plan in enumerate(_list(c, "plans")):
        features = _get(plan, "features")
        grid.children.append(el(
            "div", "border border-gray-200 rounded-3xl p-8 transition-all duration-300 flex flex-col bg-white",
            editable("h3", "text-lg font-medium text-gray-500 mb-2", _get(plan, "name"), FieldRef("plans", i, "name")),
            editable("div", "text-5xl font-bold mb-6", _get(plan, "price"), FieldRef("plans", i, "price")),
            el("div", "flex-1 space-y-3 mb-8", *[
                el("div", "flex items-center gap-3 text-gray-600",
                   txt("span", "w-5 h-5 rounded-full bg-green-100 text-green-600 flex items-center justify-center shrink-0", "✓"),
                   txt("span", "", feature))
                for feature in (features if isinstance(features, list) else [])
            ]),
            txt("button", "w-full py-3 rounded-xl border-2 border-blue-600 text-blue-600 font-bold hover:bg-blue-600 hover:text-white transition",
                f"Choose {_get(plan, 'name')}"),
        ))
    return el(
        "div", "container mx-auto px-6",
        _centered_heading(c, classes="text-3xl md:text-4xl font-bold"),
        grid,
    )


def _faq(c: dict, mobile: bool) -> Node:
    items = el("div", "space-y-4")
    for i, item in enumerate(_list(c, "items")):
        items.children.append(el(
            "div", "border border-gray-200 rounded-xl p-6 bg-white/60",
            el("div", "flex justify-between items-center mb-2",
               editable("h3", "text-lg font-semibold pr-4", _get(item, "question"), FieldRef("items", i, "question")),
               txt("span", "text-gray-400", "▼")),
            editable("p", "text-gray-600", _get(item, "answer"), FieldRef("items", i, "answer")),
        ))
    return el(
        "div", "container mx-auto px-6 max-w-3xl",
        _centered_heading(c, margin="mb-12"),
        items,
    )


def _footer(c: dict, mobile: bool) -> Node:
    links = el("div", "flex gap-8 flex-wrap justify-center")
    for i, link in enumerate(_list(c, "links")):
        links.children.append(editable(
            "a", "text-sm font-medium opacity-60 hover:opacity-100 transition",
            _get(link, "text"), FieldRef("links", i, "text"),
            href=_get(link, "url") or "#",
        ))
    return el(
        "div", "container mx-auto px-6",
        el("div", f"flex {_r(mobile, 'flex-col', 'flex-col md:flex-row')} justify-between items-center gap-8 border-t border-current/10 pt-12",
           el("div", _r(mobile, "text-center", "text-center md:text-left"),
              txt("span", "font-bold text-xl block mb-2", BRAND),
              editable("p", "text-sm opacity-60", c.get("copyright"), FieldRef("copyright"))),
           links),
    )


def _gallery(c: dict, mobile: bool) -> Node:
    grid = el("div", f"grid gap-4 {_grid4(mobile)}")
    for i, src in enumerate(_list(c, "images")):
        grid.children.append(el(
            "div", "rounded-xl overflow-hidden aspect-square",
            el("img", "w-full h-full object-cover", src=src if isinstance(src, str) else "", alt=f"Gallery {i}"),
        ))
    return el(
        "div", "container mx-auto px-6",
        _centered_heading(c, margin="mb-12"),
        grid,
    )


def _team(c: dict, mobile: bool) -> Node:
    grid = el("div", f"grid gap-8 {_grid4(mobile)}")
    for i, member in enumerate(_list(c, "members")):
        grid.children.append(el(
            "div", "text-center",
            el("div", "w-32 h-32 mx-auto rounded-full overflow-hidden mb-4 border-4 border-white shadow-lg",
               el("img", "w-full h-full object-cover", src=_get(member, "image"), alt=_get(member, "name"))),
            editable("h3", "text-xl font-bold", _get(member, "name"), FieldRef("members", i, "name")),
            editable("p", "text-blue-600 font-medium", _get(member, "role"), FieldRef("members", i, "role")),
        ))
    return el(
        "div", "container mx-auto px-6",
        _centered_heading(c),
        grid,
    )


def _blog(c: dict, mobile: bool) -> Node:
    grid = el("div", f"grid gap-8 {_grid3(mobile)}")
    for i, post in enumerate(_list(c, "posts")):
        grid.children.append(el(
            "article", "group",
            el("div", "bg-gray-100 rounded-2xl aspect-video mb-6 overflow-hidden",
               el("div", "w-full h-full bg-gray-200")),
            editable("h3", "text-xl font-bold mb-2", _get(post, "title"), FieldRef("posts", i, "title")),
            editable("p", "text-gray-600 mb-4 line-clamp-2", _get(post, "excerpt"), FieldRef("posts", i, "excerpt")),
            txt("span", "text-sm font-bold underline decoration-2 decoration-blue-200", "Read Article"),
        ))
    return el(
        "div", "container mx-auto px-6",
        _centered_heading(c),
        grid,
    )


def _newsletter(c: dict, mobile: bool) -> Node:
    return el(
        "div", "container mx-auto px-6",
        el("div", "bg-blue-600 rounded-3xl p-12 text-center text-white relative overflow-hidden",
           el("div", "relative z-10 max-w-2xl mx-auto",
              _heading(c, "h2", "text-3xl md:text-4xl font-bold mb-4"),
              editable("p", "text-blue-100 text-lg mb-8", c.get("subheading"), FieldRef("subheading")),
              el("div", f"flex {_r(mobile, 'flex-col', 'flex-col md:flex-row')} gap-3 max-w-md mx-auto",
                 el("input", "flex-1 px-6 py-3 rounded-full text-gray-900", type="email", placeholder=c.get("placeholder") or ""),
                 el("button", "px-8 py-3 bg-white text-blue-600 rounded-full font-bold hover:bg-blue-50 transition",
                    editable("span", "", c.get("buttonText"), FieldRef("buttonText")))))),
    )


def _image_text(c: dict, mobile: bool) -> Node:
    if mobile:
        direction = "flex-col"
    elif c.get("imagePosition") == "right":
        direction = "flex-col md:flex-row"
    else:
        direction = "flex-col md:flex-row-reverse"
    return el(
        "div", "container mx-auto px-6",
        el("div", f"flex {direction} gap-12 items-center",
           el("div", "flex-1 space-y-8",
              _heading(c, "h2", "text-4xl md:text-5xl font-bold leading-tight"),
              editable("p", "text-lg opacity-70 leading-relaxed", c.get("text"), FieldRef("text")),
              el("button", "text-blue-600 font-bold inline-flex items-center gap-2 text-lg",
                 editable("span", "", c.get("buttonText"), FieldRef("buttonText")),
                 txt("span", "", "→"))),
           el("div", "flex-1 w-full",
              el("img", "w-full h-auto rounded-3xl shadow-2xl object-cover aspect-video",
                 src=c.get("imageSrc") or "", alt="Feature"))),
    )


TEMPLATES: Dict[str, Callable[[dict, bool], Node]] = {
    "header":       _header,
    "hero":         _hero,
    "features":     _features,
    "testimonials": _testimonials,
    "video":        _video,
    "cta":          _cta,
    "contact":      _contact,
    "pricing":      _pricing,
    "faq":          _faq,
    "footer":       _footer,
    "gallery":      _gallery,
    "team":         _team,
    "blog":         _blog,
    "newsletter":   _newsletter,
    "image-text":   _image_text,
}


# ── Éléments libres ─────────────────────────────────────────────────────────

def extra_elements(content: dict) -> Optional[Node]:
    """Nœuds texte/bouton ajoutés par l'utilisateur, dans l'ordre, chacun aligné."""
    elements: List[Any] = _list(content, "elements")
    if not elements:
        return None
    wrap = el("div", "w-full flex flex-col items-center mt-6 gap-4")
    for i, element in enumerate(elements):
        align = align_class(_get(element, "align"))
        kind = _get(element, "type")
        if kind == "text":
            wrap.children.append(el(
                "div", f"w-full {align}",
                editable("div", "text-lg inline-block", _get(element, "content"),
                         FieldRef("elements", i, "content"), placeholder="New Text"),
            ))
        elif kind == "button":
            wrap.children.append(el(
                "div", f"w-full {align}",
                el("a", f"inline-block {_BTN_PRIMARY} px-6 py-2",
                   editable("span", "", _get(element, "text"), FieldRef("elements", i, "text"), placeholder="Button"),
                   href=_get(element, "url") or "#"),
            ))
    return wrap


def build_tree(block_type: str, content: Optional[dict], mobile: bool = False) -> Optional[Node]:
    """
    Arbre complet d'un bloc : gabarit de la variante + éléments libres en fin de
    conteneur externe. Type inconnu → None.
    """
    template = TEMPLATES.get(block_type)
    if template is None:
        return None
    content = content if isinstance(content, dict) else {}
    root = template(content, mobile)
    extra = extra_elements(content)
    if extra is not None:
        root.children.append(extra)
    return root
