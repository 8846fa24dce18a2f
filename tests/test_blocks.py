"""Tests blocs — registry des variantes, contenus par défaut, construction."""
import pytest
from pydantic import ValidationError

from zenith_builder.blocks import (
    BLOCK_TYPES, CONTENT_MODELS, LABELS, DEFAULT_STYLES,
    default_content, new_block, build_block, catalog, is_known_type,
)
from zenith_builder.blocks.base import Block, StylePayload, generate_id
from zenith_builder.exceptions import UnknownBlockTypeError


# ── Registry ─────────────────────────────────────────────────────────────────

def test_fifteen_variants_in_palette_order():
    assert BLOCK_TYPES == (
        "header", "hero", "features", "testimonials", "video", "cta", "contact", "pricing",
        "faq", "footer", "gallery", "team", "blog", "newsletter", "image-text",
    )
    assert set(CONTENT_MODELS) == set(BLOCK_TYPES)


def test_palette_labels():
    assert LABELS["header"] == "Navigation Bar"
    assert LABELS["hero"] == "Hero Section"
    assert LABELS["image-text"] == "Image & Text"


def test_is_known_type():
    assert is_known_type("pricing")
    assert not is_known_type("carousel")
    assert not is_known_type(None)


def test_catalog_exposes_json_schemas():
    entries = catalog()
    assert [e["type"] for e in entries] == list(BLOCK_TYPES)
    pricing = next(e for e in entries if e["type"] == "pricing")
    assert "plans" in pricing["schema"]["properties"]


# ── Contenus par défaut ──────────────────────────────────────────────────────

def test_default_content_values():
    hero = default_content("hero")
    assert hero["heading"] == "Create with confidence."
    assert hero["showButton"] is True
    assert "elements" not in hero
    pricing = default_content("pricing")
    assert [p["price"] for p in pricing["plans"]] == ["$0", "$29", "$99"]


def test_default_content_is_fresh_copy():
    a = default_content("pricing")
    a["plans"][0]["price"] = "$1000"
    assert default_content("pricing")["plans"][0]["price"] == "$0"


def test_default_content_unknown_type():
    with pytest.raises(UnknownBlockTypeError) as exc:
        default_content("carousel")
    assert exc.value.block_type == "carousel"


# ── new_block ────────────────────────────────────────────────────────────────

def test_generate_id_shape():
    ids = {generate_id() for _ in range(50)}
    assert len(ids) == 50
    for i in ids:
        assert len(i) == 9
        assert i.isalnum() and i == i.lower()


def test_new_block_uses_defaults():
    b = new_block("faq")
    assert b.type == "faq"
    assert b.styles == DEFAULT_STYLES
    assert b.styles is not DEFAULT_STYLES
    assert b.content == default_content("faq")


def test_new_block_unknown_type_is_value_error():
    with pytest.raises(ValueError):
        new_block("carousel")


# ── build_block ──────────────────────────────────────────────────────────────

def test_build_block_merges_onto_defaults():
    b = build_block("hero", {"heading": "Launch day"})
    assert b.content["heading"] == "Launch day"
    assert b.content["subheading"] == default_content("hero")["subheading"]
    assert b.content["buttonText"] == "Get Started"


def test_build_block_keeps_extra_keys():
    b = build_block("cta", {"badge": "New"})
    assert b.content["badge"] == "New"


def test_build_block_styles_camel_case():
    b = build_block("cta", {}, {"backgroundColor": "#111827", "textColor": "#f9fafb"})
    assert b.styles.background_color == "#111827"
    assert b.styles.text_color == "#f9fafb"
    assert b.styles.padding_top == "0rem"


def test_build_block_rejects_bad_shapes():
    with pytest.raises(ValidationError):
        build_block("features", {"items": "not a list"})
    with pytest.raises(ValidationError):
        build_block("hero", {}, {"backgroundOpacity": 2})


def test_build_block_unknown_type():
    with pytest.raises(UnknownBlockTypeError):
        build_block("carousel", {})
    with pytest.raises(UnknownBlockTypeError):
        build_block(None, {})


# ── StylePayload ─────────────────────────────────────────────────────────────

def test_style_payload_aliases():
    s = StylePayload(backgroundColor="#000000", padding_top="2rem")
    data = s.model_dump(by_alias=True)
    assert data["backgroundColor"] == "#000000"
    assert data["paddingTop"] == "2rem"
    assert data["backgroundRepeat"] == "no-repeat"


def test_block_accepts_unknown_type():
    b = Block(type="mystery")
    assert b.type == "mystery"
    assert b.content == {}
