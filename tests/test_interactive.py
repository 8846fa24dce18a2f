"""Tests rendu interactif — poignées d'édition, équivalence avec l'export, canvas."""
import html

import pytest

from zenith_builder.blocks import BLOCK_TYPES, default_content, new_block
from zenith_builder.blocks.base import Block
from zenith_builder.editor.document import DocumentEditor
from zenith_builder.renderer.base import Renderer
from zenith_builder.renderer.html import StaticRenderer, render_block
from zenith_builder.renderer.interactive import (
    BlockView, Canvas, EditableText, InteractiveRenderer, render_workspace,
)
from zenith_builder.renderer.nodes import FieldRef


class Commits:
    def __init__(self):
        self.calls = []

    def __call__(self, block_id, ref, value):
        self.calls.append((block_id, ref.path, value))


# ── Équivalence statique / interactif ────────────────────────────────────────

@pytest.mark.parametrize("block_type", BLOCK_TYPES)
def test_interactive_texts_match_static_markup(block_type):
    block = new_block(block_type)
    block.content["elements"] = [
        {"type": "text", "content": "Extra line", "align": "right"},
        {"type": "button", "text": "Extra button", "url": "#", "align": "left"},
    ]
    view = BlockView(block, Commits())
    static = render_block(block)
    texts = view.texts()
    assert texts[-2:] == ["Extra line", "Extra button"]
    pos = 0
    for text in texts:
        found = static.find(html.escape(text, quote=False), pos)
        assert found >= 0, f"{block_type}: {text!r} absent ou hors ordre"
        pos = found


def test_renderers_follow_protocol():
    assert isinstance(StaticRenderer(), Renderer)
    assert isinstance(InteractiveRenderer(Commits()), Renderer)
    assert isinstance(InteractiveRenderer(Commits()).render_block(new_block("cta")), BlockView)


# ── EditableText ─────────────────────────────────────────────────────────────

def test_blur_commits_only_changed_text():
    commits = Commits()
    handle = EditableText("b1", FieldRef("heading"), "Hello", commits)
    handle.focus()
    handle.blur()
    assert commits.calls == []

    handle.focus()
    handle.input("Hello world")
    assert handle.display == "Hello world"
    assert commits.calls == []
    handle.blur()
    assert commits.calls == [("b1", "heading", "Hello world")]
    assert handle.text == "Hello world"
    assert not handle.is_editing


def test_enter_commits_shift_enter_does_not():
    commits = Commits()
    handle = EditableText("b1", FieldRef("items", 0, "title"), "A", commits)
    handle.input("AB")
    assert handle.key_down("Enter", shift=True) is False
    assert handle.is_editing
    assert handle.key_down("Enter") is True
    assert commits.calls == [("b1", "items.0.title", "AB")]


def test_refresh_keeps_draft_while_editing():
    handle = EditableText("b1", FieldRef("heading"), "Old", Commits())
    handle.focus()
    handle.input("Typing")
    handle.refresh("External")
    assert handle.display == "Typing"
    handle.blur()
    assert handle.text == "Typing"
    handle.refresh("External")
    assert handle.text == "External"


def test_blur_without_typing_adopts_refreshed_text():
    commits = Commits()
    handle = EditableText("b1", FieldRef("heading"), "Old", commits)
    handle.focus()
    handle.refresh("From panel")
    assert handle.display == "Old"
    handle.blur()
    assert commits.calls == []
    assert handle.display == "From panel"


# ── BlockView ────────────────────────────────────────────────────────────────

def test_view_refresh_keeps_in_progress_edit():
    commits = Commits()
    block = new_block("hero")
    view = BlockView(block, commits)
    heading = view.editable("heading")
    heading.focus()
    heading.input("Draft heading")

    updated = block.model_copy(update={"content": {**block.content, "heading": "Server", "subheading": "Fresh"}})
    view.refresh(updated)

    assert view.editable("heading") is heading
    assert heading.display == "Draft heading"
    assert view.editable("subheading").text == "Fresh"
    assert "Draft heading" in view.texts()
    heading.blur()
    assert commits.calls == [(block.id, "heading", "Draft heading")]


def test_view_drops_handles_of_removed_items():
    block = new_block("faq")
    view = BlockView(block, Commits())
    assert "items.2.answer" in view.editables
    content = {**block.content, "items": block.content["items"][:1]}
    view.refresh(block.model_copy(update={"content": content}))
    assert "items.2.answer" not in view.editables
    assert "items.0.answer" in view.editables


def test_unknown_type_fallback():
    view = BlockView(Block(type="carousel"), Commits())
    assert view.is_fallback
    assert view.texts() == ["Unknown Block Type"]
    assert "Unknown Block Type" in view.to_html(0)


def test_view_style_object():
    block = new_block("cta")
    block = block.model_copy(update={"styles": block.styles.model_copy(update={"background_color": "#3366ff", "background_opacity": 0.5})})
    view = BlockView(block, Commits())
    assert view.style["backgroundColor"] == "rgba(51,102,255,0.5)"
    assert view.style["paddingTop"] == "0rem"


def test_view_html_marks_editables_and_chrome():
    block = new_block("hero")
    out = BlockView(block, Commits()).to_html(2, selected=True)
    assert f'data-block-id="{block.id}"' in out
    assert 'data-index="2"' in out
    assert 'contenteditable="true" data-bind="heading" data-placeholder="Enter Heading"' in out
    assert 'data-bind="subheading"' in out
    assert "border-blue-500" in out
    assert 'title="Remove Block"' in out
    assert ">hero</span>" in out


# ── Canvas ───────────────────────────────────────────────────────────────────

def test_canvas_sync_rerenders_changed_blocks_only():
    canvas = Canvas(Commits())
    a, b = new_block("hero"), new_block("cta")
    assert canvas.sync([a, b]) == [a.id, b.id]
    assert canvas.sync([a, b]) == []

    b2 = b.model_copy(update={"content": {**b.content, "heading": "Changed"}})
    assert canvas.sync([a, b2]) == [b.id]
    assert canvas.view(b.id).block is b2

    assert canvas.sync([b2]) == []
    assert list(canvas.views) == [b.id]
    assert canvas.order == [b.id]


def test_canvas_blur_flows_back_to_editor():
    editor = DocumentEditor()
    canvas = Canvas(editor.commit_edit)
    editor.subscribe(canvas.sync)
    block = editor.insert("pricing")

    handle = canvas.view(block.id).editable("plans.1.price")
    handle.focus()
    handle.input("$49")
    handle.blur()

    assert editor.get(block.id).content["plans"][1]["price"] == "$49"
    assert canvas.view(block.id).block is editor.get(block.id)
    assert editor.can_undo


def test_canvas_external_update_during_focus_stays_in_sync():
    editor = DocumentEditor()
    canvas = Canvas(editor.commit_edit)
    editor.subscribe(canvas.sync)
    block = editor.insert("hero")
    view = canvas.view(block.id)

    handle = view.editable("heading")
    handle.focus()
    editor.update_content(block.id, {"heading": "From panel"})
    depth = len(editor.history.past)
    handle.blur()

    stored = editor.get(block.id).content["heading"]
    assert stored == "From panel"
    assert handle.display == stored
    assert stored in view.texts()
    assert default_content("hero")["heading"] not in view.texts()
    assert "From panel" in view.to_html(0)
    assert "From panel" in render_block(editor.get(block.id))
    assert len(editor.history.past) == depth


def test_canvas_mobile_toggle():
    canvas = Canvas(Commits())
    block = new_block("features")
    canvas.sync([block])
    assert "md:grid-cols-3" in canvas.to_html()
    canvas.set_mobile(True)
    assert "md:grid-cols-3" not in canvas.to_html()
    other = new_block("team")
    canvas.sync([block, other])
    assert canvas.view(other.id).mobile


def test_empty_canvas_and_workspace():
    canvas = Canvas(Commits())
    canvas.sync([])
    assert "Drag components here" in canvas.to_html()
    page = render_workspace(canvas, None)
    assert page.startswith("<!DOCTYPE html>")
    assert 'data-palette="image-text"' in page
    assert "Image &amp; Text" in page
    assert 'const BASE = "/editor";' in page
