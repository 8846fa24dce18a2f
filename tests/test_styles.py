"""Tests résolution des styles — rgba, précédence du fond, sérialisations."""
import pytest

from zenith_builder.blocks.base import StylePayload
from zenith_builder.renderer.css import (
    hex_to_rgb, resolve, style_string, style_object, block_style_string,
)


# ── hex_to_rgb ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value,expected", [
    ("#3366ff", (51, 102, 255)),
    ("#3366FF", (51, 102, 255)),
    ("#36f", (51, 102, 255)),
    ("#000000", (0, 0, 0)),
])
def test_hex_to_rgb(value, expected):
    assert hex_to_rgb(value) == expected


@pytest.mark.parametrize("value", ["3366ff", "#3366f", "#gg0000", "red", "rgb(1,2,3)", "", None])
def test_hex_to_rgb_invalid(value):
    assert hex_to_rgb(value) is None


# ── resolve ──────────────────────────────────────────────────────────────────

def test_opacity_blending():
    props = resolve(StylePayload(background_color="#3366ff", background_opacity=0.5))
    assert props["background-color"] == "rgba(51,102,255,0.5)"


def test_opacity_keeps_full_precision():
    props = resolve(StylePayload(background_color="#3366ff", background_opacity=0.123456789))
    assert props["background-color"] == "rgba(51,102,255,0.123456789)"
    assert resolve(StylePayload(background_opacity=0.0))["background-color"] == "rgba(255,255,255,0)"


def test_default_background():
    assert resolve(StylePayload())["background-color"] == "rgba(255,255,255,1)"


def test_gradient_overrides_color_and_image():
    props = resolve(StylePayload(
        background_color="#3366ff", background_opacity=0.5,
        background_image="https://example.com/bg.png",
        gradient="linear-gradient(135deg, #ffffff 0%, #f3f4f6 100%)",
    ))
    assert props["background"] == "linear-gradient(135deg, #ffffff 0%, #f3f4f6 100%)"
    assert "background-color" not in props
    assert "background-image" not in props


def test_image_layer():
    props = resolve(StylePayload(background_image="https://example.com/bg.png"))
    assert props["background-image"] == "url(https://example.com/bg.png)"
    assert props["background-color"] == "rgba(255,255,255,1)"


def test_non_hex_color_passes_through_without_opacity():
    props = resolve(StylePayload(background_color="red", background_opacity=0.3))
    assert props["background-color"] == "red"


def test_property_order():
    props = resolve(StylePayload(padding_top="4rem", text_color="#334155"))
    assert list(props) == [
        "padding-top", "padding-bottom", "margin-top", "margin-bottom",
        "background-color", "color",
        "background-size", "background-repeat", "background-position",
    ]
    assert props["padding-top"] == "4rem"
    assert props["color"] == "#334155"


def test_unset_enumerations_omitted():
    props = resolve(StylePayload(background_size=None))
    assert "background-size" not in props


# ── Sérialisations ───────────────────────────────────────────────────────────

def test_style_string():
    s = block_style_string(StylePayload())
    assert s.startswith("padding-top: 0rem; padding-bottom: 0rem; margin-top: 0rem")
    assert "background-color: rgba(255,255,255,1); color: #1a202c" in s


def test_style_object_same_map():
    props = resolve(StylePayload(background_color="#3366ff", background_opacity=0.5))
    obj = style_object(props)
    assert obj["paddingTop"] == "0rem"
    assert obj["backgroundColor"] == "rgba(51,102,255,0.5)"
    assert obj["color"] == "#1a202c"
    assert list(obj.values()) == list(props.values())
    assert style_string(props).count(";") == len(obj) - 1
