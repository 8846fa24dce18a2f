"""
Router FastAPI — shell de l'éditeur.

GET    /editor/                    → canvas interactif (HTML)
GET    /editor/blocks              → état du document
POST   /editor/blocks              → insertion depuis la palette
POST   /editor/drop                → protocole de drag (insertion ou déplacement)
POST   /editor/reorder             → déplacement par index
DELETE /editor/blocks/{id}         → suppression
PATCH  /editor/blocks/{id}/styles  → fusion de styles partiels
PATCH  /editor/blocks/{id}/content → fusion de contenu partiel
POST   /editor/blocks/{id}/edit    → validation d'un texte édité (blur)
POST   /editor/select              → sélection
POST   /editor/undo | /editor/redo → historique
GET    /editor/export              → téléchargement de la page exportée
GET    /editor/blocks/{id}/copy    → HTML d'un bloc (presse-papier)
POST   /editor/blocks/{id}/palette → palette (fond + texte)
POST   /editor/blocks/{id}/gradient → dégradé on/off
POST   /editor/blocks/{id}/elements → ajout d'un élément libre (texte / bouton)
DELETE /editor/blocks/{id}/elements/{i}       → suppression d'un élément libre
POST   /editor/blocks/{id}/elements/{i}/align → alignement d'un élément libre
GET    /editor/catalog             → blocs disponibles + JSON schemas
POST   /editor/generate            → Magic Build

Toutes les routes qui touchent la session sont `async def` : elles s'exécutent sur la
boucle d'événements, donc les mutations restent séquentielles (pas de threadpool).
"""
from typing import Any, Dict, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from . import config
from .blocks import catalog as block_catalog
from .blocks.base import Block
from .editor import properties
from .exceptions import UnknownBlockTypeError
from .export import copy_block_html, export_page
from .generator.dialog import INVALID_RESPONSE_ALERT
from .renderer.interactive import render_workspace
from .session import EditorSession

router = APIRouter(prefix="/editor", tags=["editor"])


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertRequest(_Body):
    type: str
    index: Optional[int] = None


class DropRequest(_Body):
    block_type: Optional[str] = None
    drag_index: Optional[int] = None
    index: Optional[int] = None


class ReorderRequest(_Body):
    from_index: int
    to_index: int


class EditRequest(_Body):
    path: str
    value: str


class SelectRequest(_Body):
    id: Optional[str] = None


class GenerateRequest(_Body):
    prompt: str


class PaletteRequest(_Body):
    name: str


class GradientRequest(_Body):
    on: bool


class ElementRequest(_Body):
    kind: str


class AlignRequest(_Body):
    align: Literal["left", "center", "right"]


def get_session(request: Request) -> EditorSession:
    return request.app.state.editor_session


def _block(block: Optional[Block], block_id: str) -> dict:
    if block is None:
        raise HTTPException(status_code=404, detail=f"Bloc '{block_id}' introuvable")
    return block.model_dump(by_alias=True)


# ── Canvas ───────────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse, summary="Canvas interactif")
async def workspace(device: Optional[str] = None, session: EditorSession = Depends(get_session)) -> HTMLResponse:
    if device in ("mobile", "desktop"):
        session.canvas.set_mobile(device == "mobile")
    editor = session.editor
    return HTMLResponse(render_workspace(
        session.canvas, editor.selected_id, router.prefix,
        can_undo=editor.can_undo, can_redo=editor.can_redo,
        palettes=[(p.name, p.bg) for p in properties.PALETTES],
    ))


@router.get("/blocks", summary="État du document")
async def list_blocks(session: EditorSession = Depends(get_session)) -> dict:
    return session.state()


# ── Mutations ────────────────────────────────────────────────────────────────

@router.post("/blocks", summary="Insère un bloc depuis la palette")
async def insert_block(body: InsertRequest, session: EditorSession = Depends(get_session)) -> dict:
    try:
        block = session.editor.insert(body.type, body.index)
    except (UnknownBlockTypeError, IndexError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return block.model_dump(by_alias=True)


@router.post("/drop", summary="Dépôt d'un drag (palette ou canvas)")
async def drop(body: DropRequest, session: EditorSession = Depends(get_session)) -> dict:
    transfer = {"blockType": body.block_type, "dragIndex": body.drag_index}
    try:
        session.editor.handle_drop(transfer, body.index)
    except (UnknownBlockTypeError, IndexError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return session.state()


@router.post("/reorder", summary="Déplace un bloc")
async def reorder(body: ReorderRequest, session: EditorSession = Depends(get_session)) -> dict:
    try:
        session.editor.reorder(body.from_index, body.to_index)
    except IndexError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return session.state()


@router.delete("/blocks/{block_id}", summary="Supprime un bloc")
async def delete_block(block_id: str, session: EditorSession = Depends(get_session)) -> dict:
    if not session.editor.delete(block_id):
        raise HTTPException(status_code=404, detail=f"Bloc '{block_id}' introuvable")
    return session.state()


@router.patch("/blocks/{block_id}/styles", summary="Met à jour les styles d'un bloc")
async def update_styles(block_id: str, styles: Dict[str, Any], session: EditorSession = Depends(get_session)) -> dict:
    try:
        block = session.editor.update_styles(block_id, styles)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _block(block, block_id)


@router.patch("/blocks/{block_id}/content", summary="Met à jour le contenu d'un bloc")
async def update_content(block_id: str, content: Dict[str, Any], session: EditorSession = Depends(get_session)) -> dict:
    return _block(session.editor.update_content(block_id, content), block_id)


@router.post("/blocks/{block_id}/edit", summary="Valide un texte édité sur le canvas")
async def commit_edit(block_id: str, body: EditRequest, session: EditorSession = Depends(get_session)) -> dict:
    view = session.canvas.views.get(block_id)
    if view is None:
        raise HTTPException(status_code=404, detail=f"Bloc '{block_id}' introuvable")
    handle = view.editables.get(body.path)
    if handle is None:
        raise HTTPException(status_code=422, detail=f"Champ '{body.path}' non éditable")
    handle.focus()
    handle.input(body.value)
    handle.blur()
    return _block(session.editor.get(block_id), block_id)


@router.post("/select", summary="Sélectionne un bloc")
async def select(body: SelectRequest, session: EditorSession = Depends(get_session)) -> dict:
    session.editor.select(body.id)
    return session.state()


@router.post("/undo", summary="Annule la dernière action")
async def undo(session: EditorSession = Depends(get_session)) -> dict:
    return {"changed": session.editor.undo(), **session.state()}


@router.post("/redo", summary="Rétablit l'action annulée")
async def redo(session: EditorSession = Depends(get_session)) -> dict:
    return {"changed": session.editor.redo(), **session.state()}


# ── Panneau de propriétés ────────────────────────────────────────────────────

def _require(session: EditorSession, block_id: str) -> Block:
    block = session.editor.get(block_id)
    if block is None:
        raise HTTPException(status_code=404, detail=f"Bloc '{block_id}' introuvable")
    return block


@router.post("/blocks/{block_id}/palette", summary="Applique une palette au bloc")
async def apply_palette(block_id: str, body: PaletteRequest, session: EditorSession = Depends(get_session)) -> dict:
    _require(session, block_id)
    try:
        block = properties.apply_palette(session.editor, block_id, body.name)
    except KeyError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _block(block, block_id)


@router.post("/blocks/{block_id}/gradient", summary="Active / désactive le dégradé")
async def toggle_gradient(block_id: str, body: GradientRequest, session: EditorSession = Depends(get_session)) -> dict:
    _require(session, block_id)
    return _block(properties.toggle_gradient(session.editor, block_id, body.on), block_id)


@router.post("/blocks/{block_id}/elements", summary="Ajoute un élément libre")
async def add_element(block_id: str, body: ElementRequest, session: EditorSession = Depends(get_session)) -> dict:
    _require(session, block_id)
    try:
        block = properties.add_element(session.editor, block_id, body.kind)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _block(block, block_id)


@router.delete("/blocks/{block_id}/elements/{index}", summary="Supprime un élément libre")
async def remove_element(block_id: str, index: int, session: EditorSession = Depends(get_session)) -> dict:
    elements = _require(session, block_id).content.get("elements") or []
    if not 0 <= index < len(elements):
        raise HTTPException(status_code=404, detail=f"Élément {index} introuvable")
    return _block(properties.remove_element(session.editor, block_id, index), block_id)


@router.post("/blocks/{block_id}/elements/{index}/align", summary="Aligne un élément libre")
async def align_element(block_id: str, index: int, body: AlignRequest,
                        session: EditorSession = Depends(get_session)) -> dict:
    elements = _require(session, block_id).content.get("elements") or []
    if not 0 <= index < len(elements):
        raise HTTPException(status_code=404, detail=f"Élément {index} introuvable")
    return _block(properties.align_element(session.editor, block_id, index, body.align), block_id)


# ── Export ───────────────────────────────────────────────────────────────────

@router.get("/export", response_class=HTMLResponse, summary="Télécharge la page exportée")
async def export(session: EditorSession = Depends(get_session)) -> HTMLResponse:
    return HTMLResponse(
        export_page(session.editor.blocks),
        headers={"Content-Disposition": f'attachment; filename="{config.EXPORT_FILENAME}"'},
    )


@router.get("/blocks/{block_id}/copy", response_class=PlainTextResponse, summary="HTML d'un bloc")
async def copy_block(block_id: str, session: EditorSession = Depends(get_session)) -> PlainTextResponse:
    return PlainTextResponse(copy_block_html(_require(session, block_id)))


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    return JSONResponse({"blocks": block_catalog()})


# ── Magic Build ──────────────────────────────────────────────────────────────

@router.post("/generate", summary="Génère un bloc à partir d'un prompt")
async def generate(body: GenerateRequest, session: EditorSession = Depends(get_session)) -> dict:
    dialog = session.dialog
    if not body.prompt.strip():
        raise HTTPException(status_code=422, detail="Prompt vide")
    if dialog.is_generating:
        raise HTTPException(status_code=409, detail="Génération déjà en cours")
    dialog.open()
    dialog.prompt = body.prompt
    alerts = len(dialog.alerts)
    block = await dialog.submit()
    if block is None:
        message = dialog.alerts[-1] if len(dialog.alerts) > alerts else INVALID_RESPONSE_ALERT
        dialog.close()
        status = 422 if message == INVALID_RESPONSE_ALERT else 503
        raise HTTPException(status_code=status, detail=message)
    return block.model_dump(by_alias=True)
