"""Tests panneau de propriétés — palettes, dégradé, éléments libres."""
import pytest

from zenith_builder.editor import properties
from zenith_builder.editor.document import DocumentEditor
from zenith_builder.renderer.css import resolve


@pytest.fixture
def editor():
    e = DocumentEditor()
    e.insert("hero")
    return e


def _block(editor):
    return editor.blocks[0]


def test_palettes():
    assert [p.name for p in properties.PALETTES] == ["Clean", "Dark", "Ocean", "Rose", "Slate", "Teal"]
    dark = properties.palette("Dark")
    assert (dark.bg, dark.text) == ("#111827", "#f9fafb")
    with pytest.raises(KeyError):
        properties.palette("Neon")


def test_apply_palette_clears_gradient(editor):
    block_id = _block(editor).id
    properties.toggle_gradient(editor, block_id, True)
    assert _block(editor).styles.gradient
    properties.apply_palette(editor, block_id, "Ocean")
    styles = _block(editor).styles
    assert styles.background_color == "#eff6ff"
    assert styles.text_color == "#1e3a8a"
    assert styles.gradient is None
    assert resolve(styles)["background-color"] == "rgba(239,246,255,1)"


@pytest.mark.parametrize("bg,expected", [
    ("#ffffff", "linear-gradient(135deg, #ffffff 0%, #f3f4f6 100%)"),
    ("#111827", "linear-gradient(135deg, #111827 0%, #1f2937 100%)"),
    ("#3366ff", "linear-gradient(135deg, #3366ff 0%, rgba(255,255,255,0) 100%)"),
])
def test_toggle_gradient_presets(editor, bg, expected):
    block_id = _block(editor).id
    editor.update_styles(block_id, {"backgroundColor": bg})
    properties.toggle_gradient(editor, block_id, True)
    assert _block(editor).styles.gradient == expected
    assert resolve(_block(editor).styles)["background"] == expected
    properties.toggle_gradient(editor, block_id, False)
    assert _block(editor).styles.gradient is None


def test_add_elements(editor):
    block_id = _block(editor).id
    properties.add_element(editor, block_id, "text")
    properties.add_element(editor, block_id, "button")
    assert _block(editor).content["elements"] == [
        {"type": "text", "content": "New Text Block", "align": "center"},
        {"type": "button", "text": "New Button", "url": "#", "align": "center"},
    ]
    with pytest.raises(ValueError):
        properties.add_element(editor, block_id, "video")


def test_remove_and_align_element(editor):
    block_id = _block(editor).id
    for _ in range(3):
        properties.add_element(editor, block_id, "text")
    properties.align_element(editor, block_id, 2, "right")
    properties.remove_element(editor, block_id, 0)
    elements = _block(editor).content["elements"]
    assert len(elements) == 2
    assert elements[1]["align"] == "right"
    assert elements[0]["align"] == "center"


def test_each_action_is_one_history_step(editor):
    block_id = _block(editor).id
    depth = len(editor.history.past)
    properties.apply_palette(editor, block_id, "Rose")
    properties.add_element(editor, block_id, "button")
    properties.update_item(editor, block_id, "elements", 0, "url", "/signup")
    assert len(editor.history.past) == depth + 3
    assert _block(editor).content["elements"][0]["url"] == "/signup"
    editor.undo()
    assert _block(editor).content["elements"][0]["url"] == "#"


def test_unknown_block_ignored(editor):
    assert properties.toggle_gradient(editor, "ghost", True) is None
    assert properties.add_element(editor, "ghost", "text") is None
    assert properties.remove_element(editor, "ghost", 0) is None
