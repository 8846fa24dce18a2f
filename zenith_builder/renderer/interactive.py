"""
Rendu interactif — projection éditable des blocs sur le canvas.

Même arbre que l'export (templates.build_tree) ; s'y ajoutent :
  - une poignée EditableText par nœud lié à un champ (focus / saisie / blur),
  - le chrome de sélection (libellé du type, poignée de drag, suppression),
  - la simulation mobile.

Le rendu ne détient aucun état faisant autorité : seul le texte en cours
d'édition (non validé avant le blur) est conservé entre deux rafraîchissements.
"""
import html
import json
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .. import config
from ..blocks import LABELS
from ..blocks.base import Block
from .css import resolve, style_object, style_string
from .html import serialize
from .nodes import FieldRef, Node, el, txt
from .templates import build_tree

log = logging.getLogger(__name__)

# (block_id, champ, nouvelle valeur), branché sur DocumentEditor.commit_edit
OnCommit = Callable[[str, FieldRef, str], None]

UNKNOWN_BLOCK_TEXT = "Unknown Block Type"


class EditableText:
    """Nœud texte éditable. La valeur n'est remontée qu'à la perte de focus."""

    def __init__(self, block_id: str, ref: FieldRef, text: str, on_commit: OnCommit,
                 placeholder: Optional[str] = None):
        self.block_id = block_id
        self.ref = ref
        self.text = text
        self.placeholder = placeholder
        self.is_editing = False
        self._on_commit = on_commit
        self._draft = text
        self._base = text

    @property
    def display(self) -> str:
        return self._draft if self.is_editing else self.text

    def focus(self) -> None:
        self.is_editing = True
        self._draft = self.text
        self._base = self.text

    def input(self, value: str) -> None:
        if not self.is_editing:
            self.focus()
        self._draft = value

    def key_down(self, key: str, shift: bool = False) -> bool:
        """Entrée (sans Maj) valide l'édition. Retourne True si la touche est consommée."""
        if key == "Enter" and not shift:
            self.blur()
            return True
        return False

    def blur(self) -> None:
        """Brouillon non modifié → le texte stocké (éventuellement rafraîchi entre-temps) est repris."""
        if not self.is_editing:
            return
        self.is_editing = False
        value = self._draft
        if value == self._base or value == self.text:
            return
        self.text = value
        self._on_commit(self.block_id, self.ref, value)

    def refresh(self, text: str) -> None:
        """Contenu rafraîchi de l'extérieur : le brouillon affiché n'est pas touché pendant une édition."""
        self.text = text
        if not self.is_editing:
            self._draft = text


class BlockView:
    """Projection interactive d'un bloc."""

    def __init__(self, block: Block, on_commit: OnCommit, mobile: bool = False):
        self.block = block
        self.mobile = mobile
        self.editables: Dict[str, EditableText] = {}
        self.tree: Node = Node("div")
        self.is_fallback = False
        self._on_commit = on_commit
        self._project()

    def _project(self) -> None:
        tree = build_tree(self.block.type, self.block.content, self.mobile)
        self.is_fallback = tree is None
        if tree is None:
            tree = el("div", "p-8 text-center text-gray-400", txt("div", "", UNKNOWN_BLOCK_TEXT))
        self.tree = tree

        seen = set()
        for node in tree.editables():
            path = node.bind.path
            seen.add(path)
            handle = self.editables.get(path)
            if handle is None:
                self.editables[path] = EditableText(self.block.id, node.bind, node.text or "",
                                                    self._on_commit, node.placeholder)
            else:
                handle.refresh(node.text or "")
                node.text = handle.display
        for path in set(self.editables) - seen:
            del self.editables[path]

    def refresh(self, block: Block) -> None:
        self.block = block
        self._project()

    def set_mobile(self, mobile: bool) -> None:
        if mobile != self.mobile:
            self.mobile = mobile
            self._project()

    def editable(self, path: str) -> EditableText:
        return self.editables[path]

    @property
    def style(self) -> Dict[str, str]:
        """Objet style live (camelCase), issu de la même résolution que l'export."""
        return style_object(resolve(self.block.styles))

    def texts(self) -> List[str]:
        """Textes affichés, dans l'ordre du document (édition en cours incluse)."""
        out = []
        for node in self.tree.walk():
            value = self.editables[node.bind.path].display if node.bind else node.text
            if value:
                out.append(value)
        return out

    def _attr_hook(self, node: Node) -> Dict[str, str]:
        if node.bind is None:
            return {}
        attrs = {"contenteditable": "true", "data-bind": node.bind.path}
        if node.placeholder:
            attrs["data-placeholder"] = node.placeholder
        return attrs

    def to_html(self, index: int, selected: bool = False) -> str:
        for node in self.tree.editables():
            node.text = self.editables[node.bind.path].display
        border = "border-blue-500 shadow-xl" if selected else "border-transparent hover:border-blue-300"
        chrome_state = "opacity-100" if selected else "opacity-0 group-hover:opacity-100"
        label = el("div", f"builder-chrome absolute -top-3 left-0 bg-blue-500 text-white text-xs px-2 py-0.5 rounded-t-md {chrome_state}",
                   txt("span", "font-mono uppercase", self.block.type))
        tools = el("div", f"builder-chrome absolute top-2 right-2 flex gap-2 bg-white/90 rounded shadow-sm border border-gray-200 p-1 {chrome_state}",
                   txt("span", "cursor-move text-gray-500 p-1", "⋮⋮"),
                   txt("button", "text-red-400 hover:text-red-600 p-1", "✕", data_action="delete", title="Remove Block"))
        section = el(
            "section", f"builder-block relative group border-2 {border}",
            label, tools, self.tree,
            style=style_string(resolve(self.block.styles)),
            data_block_id=self.block.id,
            data_index=str(index),
            draggable="true",
        )
        return serialize(section, 0, self._attr_hook)


class InteractiveRenderer:
    """Renderer canvas (conforme au Protocol Renderer) : bloc → BlockView."""

    def __init__(self, on_commit: OnCommit, mobile: bool = False):
        self.on_commit = on_commit
        self.mobile = mobile

    def render_block(self, block: Block) -> BlockView:
        return BlockView(block, self.on_commit, self.mobile)


class Canvas:
    """Liste des vues, synchronisée sur la liste de blocs de l'éditeur."""

    def __init__(self, on_commit: OnCommit, mobile: bool = False):
        self.mobile = mobile
        self.views: Dict[str, BlockView] = {}
        self.order: List[str] = []
        self._renderer = InteractiveRenderer(on_commit, mobile)

    def sync(self, blocks: Sequence[Block]) -> List[str]:
        """Ne re-rend que les blocs modifiés (objet différent). Retourne leurs ids."""
        rendered = []
        for block in blocks:
            view = self.views.get(block.id)
            if view is None:
                self.views[block.id] = self._renderer.render_block(block)
                rendered.append(block.id)
            elif view.block is not block:
                view.refresh(block)
                rendered.append(block.id)
        self.order = [b.id for b in blocks]
        for block_id in set(self.views) - set(self.order):
            del self.views[block_id]
        if rendered:
            log.debug("canvas : %d bloc(s) re-rendu(s)", len(rendered))
        return rendered

    def set_mobile(self, mobile: bool) -> None:
        self.mobile = mobile
        self._renderer.mobile = mobile
        for view in self.views.values():
            view.set_mobile(mobile)

    def view(self, block_id: str) -> BlockView:
        return self.views[block_id]

    def to_html(self, selected_id: Optional[str] = None) -> str:
        if not self.order:
            return serialize(el(
                "div", "empty-canvas flex flex-col items-center justify-center text-gray-300 border-2 border-dashed border-gray-300 m-4 rounded-xl p-16",
                txt("p", "text-xl font-medium", "Drag components here"),
                txt("p", "text-sm mt-1", "or use Magic Build to generate"),
            ))
        return "\n".join(
            self.views[block_id].to_html(i, block_id == selected_id)
            for i, block_id in enumerate(self.order)
        )


# ── Page d'édition (palette + canvas) ───────────────────────────────────────

_WORKSPACE_JS = """
const api = (path, method, body) => fetch(BASE + path, {method, headers: {'Content-Type': 'application/json'},
  body: body === undefined ? undefined : JSON.stringify(body)}).then(() => location.reload());
document.querySelectorAll('[data-palette]').forEach(n => n.addEventListener('dragstart', e => {
  e.dataTransfer.setData('blockType', n.dataset.palette); }));
document.querySelectorAll('section[data-block-id]').forEach(s => {
  const id = s.dataset.blockId, index = parseInt(s.dataset.index);
  s.addEventListener('dragstart', e => e.dataTransfer.setData('dragIndex', String(index)));
  s.addEventListener('dragover', e => e.preventDefault());
  s.addEventListener('drop', e => { e.preventDefault(); e.stopPropagation();
    const dragIndex = e.dataTransfer.getData('dragIndex');
    api('/drop', 'POST', {blockType: e.dataTransfer.getData('blockType') || null,
      dragIndex: dragIndex === '' ? null : parseInt(dragIndex), index}); });
  s.addEventListener('click', e => { e.stopPropagation(); if (!e.target.isContentEditable) api('/select', 'POST', {id}); });
  s.querySelector('[data-action=delete]').addEventListener('click', e => { e.stopPropagation(); api('/blocks/' + id, 'DELETE'); });
  s.querySelectorAll('[data-bind]').forEach(n => {
    n.addEventListener('keydown', e => { if (e.key === 'Enter' && !e.shiftKey) { e.preventDefault(); n.blur(); } });
    n.addEventListener('blur', () => api('/blocks/' + id + '/edit', 'POST', {path: n.dataset.bind, value: n.innerText}));
  });
});
const canvas = document.getElementById('canvas');
canvas.addEventListener('dragover', e => e.preventDefault());
canvas.addEventListener('drop', e => { e.preventDefault(); const t = e.dataTransfer.getData('blockType');
  if (t) api('/drop', 'POST', {blockType: t}); });
document.querySelectorAll('[data-prop]').forEach(n => n.addEventListener(n.type === 'checkbox' ? 'change' : 'click', () => {
  const b = '/blocks/' + SELECTED, v = n.dataset.value, i = n.dataset.index;
  if (n.dataset.prop === 'palette') api(b + '/palette', 'POST', {name: v});
  if (n.dataset.prop === 'gradient') api(b + '/gradient', 'POST', {on: n.checked});
  if (n.dataset.prop === 'element') api(b + '/elements', 'POST', {kind: v});
  if (n.dataset.prop === 'align') api(b + '/elements/' + i + '/align', 'POST', {align: v});
  if (n.dataset.prop === 'remove-element') api(b + '/elements/' + i, 'DELETE');
}));
"""


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


def render_properties(block: Optional[Block], palettes: Sequence[Tuple[str, str]] = ()) -> str:
    """Panneau de propriétés du bloc sélectionné (palette, dégradé, éléments libres)."""
    if block is None:
        return '      <p class="text-sm text-gray-400">Select a block to edit its properties</p>'
    lines = [f'      <h3 class="font-bold">{_esc(LABELS.get(block.type, block.type))}</h3>']
    lines += [
        f'      <button data-prop="palette" data-value="{_esc(name)}" title="{_esc(name)}" '
        f'class="w-8 h-8 rounded-full border" style="background: {_esc(bg)}"></button>'
        for name, bg in palettes
    ]
    checked = " checked" if block.styles.gradient else ""
    lines.append(f'      <label><input type="checkbox" data-prop="gradient"{checked}> Subtle gradient</label>')
    lines.append('      <button data-prop="element" data-value="text">+ Text</button>')
    lines.append('      <button data-prop="element" data-value="button">+ Button</button>')
    for i, element in enumerate(block.content.get("elements") or []):
        kind = element.get("type", "text") if isinstance(element, dict) else "text"
        aligns = "".join(
            f'<button data-prop="align" data-index="{i}" data-value="{a}">{a[0].upper()}</button>'
            for a in ("left", "center", "right")
        )
        lines.append(
            f'      <div data-element="{i}">{_esc(kind)} {aligns}'
            f'<button data-prop="remove-element" data-index="{i}">✕</button></div>'
        )
    return "\n".join(lines)


def render_workspace(canvas: Canvas, selected_id: Optional[str], base_path: str = "/editor",
                     can_undo: bool = False, can_redo: bool = False,
                     palettes: Sequence[Tuple[str, str]] = ()) -> str:
    """Page complète de l'éditeur : palette draggable, barre d'outils, canvas, propriétés."""
    palette = "\n".join(
        f'      <div draggable="true" data-palette="{html.escape(t, quote=True)}" '
        f'class="p-3 rounded-xl border border-gray-100 cursor-grab">{html.escape(label, quote=False)}</div>'
        for t, label in LABELS.items()
    )
    device = "desktop" if canvas.mobile else "mobile"
    width = "w-[375px]" if canvas.mobile else "w-full max-w-[1200px]"
    undo_state = "" if can_undo else " disabled"
    redo_state = "" if can_redo else " disabled"
    selected = canvas.views.get(selected_id) if selected_id else None
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Zenith Builder</title>
  <script src="{config.TAILWIND_CDN}"></script>
</head>
<body class="flex h-screen bg-gray-100">
  <aside class="w-64 bg-white p-4 space-y-2 overflow-y-auto">
{palette}
  </aside>
  <main class="flex-1 flex flex-col">
    <div class="h-16 bg-white flex items-center gap-4 px-6">
      <a href="{base_path}/?device={device}">Toggle {device}</a>
      <button onclick="api('/undo', 'POST')"{undo_state}>Undo</button>
      <button onclick="api('/redo', 'POST')"{redo_state}>Redo</button>
      <a href="{base_path}/export">Export</a>
    </div>
    <div id="canvas" class="flex-1 overflow-y-auto p-8 flex justify-center">
      <div class="bg-white shadow-2xl {width}">
{canvas.to_html(selected_id)}
      </div>
    </div>
  </main>
  <aside id="properties" class="w-72 bg-white p-4 space-y-3 overflow-y-auto">
{render_properties(selected.block if selected else None, palettes)}
  </aside>
  <script>
const BASE = {json.dumps(base_path)};
const SELECTED = {json.dumps(selected.block.id if selected else None)};
{_WORKSPACE_JS}
  </script>
</body>
</html>
"""
