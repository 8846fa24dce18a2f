"""Tests export — document autonome, déterminisme, copie presse-papier."""
from zenith_builder import config
from zenith_builder.blocks import new_block
from zenith_builder.blocks.base import Block
from zenith_builder.editor.document import DocumentEditor
from zenith_builder.export import copy_block_html, export_page, write_export


def _editor(*types):
    e = DocumentEditor()
    for t in types:
        e.insert(t)
    return e


def test_document_boilerplate():
    out = export_page(_editor("hero").blocks)
    assert out.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
    assert '<meta charset="UTF-8">' in out
    assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in out
    assert f'<script src="{config.TAILWIND_CDN}"></script>' in out
    assert "<title>Exported Page</title>" in out
    assert out.rstrip().endswith("</body>\n</html>")


def test_sections_in_order_with_id_and_type():
    editor = _editor("header", "pricing", "footer")
    out = export_page(editor.blocks)
    positions = []
    for block in editor.blocks:
        marker = f'<section id="{block.id}" data-block-type="{block.type}"'
        assert marker in out
        assert f"<!-- Block: {block.type} -->" in out
        positions.append(out.index(marker))
    assert positions == sorted(positions)


def test_export_is_deterministic():
    editor = _editor("features", "testimonials", "contact", "gallery")
    assert export_page(editor.blocks) == export_page(editor.blocks)


def test_unknown_blocks_dropped():
    blocks = [new_block("cta"), Block(type="carousel", content={"heading": "Secret"})]
    out = export_page(blocks)
    assert "carousel" not in out
    assert "Secret" not in out
    assert out.count("<section ") == 1


def test_empty_document():
    out = export_page([])
    assert "<section" not in out
    assert "<body>\n\n</body>" in out


def test_title_escaped():
    assert "<title>Fish &amp; Chips</title>" in export_page([], title="Fish & Chips")


def test_inline_styles_resolved():
    editor = _editor("hero")
    block = editor.blocks[0]
    editor.update_styles(block.id, {"backgroundColor": "#3366ff", "backgroundOpacity": 0.5, "paddingTop": "6rem"})
    out = export_page(editor.blocks)
    assert "padding-top: 6rem;" in out
    assert "background-color: rgba(51,102,255,0.5)" in out


def test_pricing_scenario():
    editor = DocumentEditor()
    block = editor.insert("pricing")
    editor.commit_edit(block.id, "plans.1.price", "$49")
    out = export_page(editor.blocks)

    assert "$49" in out
    assert "$29" not in out
    starter, pro, enterprise = (out.index(f">{name}</h3>") for name in ("Starter", "Pro", "Enterprise"))
    assert pro < out.index(">$49</div>") < out.index("Choose Pro") < enterprise
    assert starter < out.index(">$0</div>") < pro
    assert enterprise < out.index(">$99</div>")


def test_extra_elements_exported_last_in_block():
    editor = _editor("faq")
    block = editor.blocks[0]
    editor.update_content(block.id, {"elements": [{"type": "button", "text": "Ask us", "url": "/ask", "align": "right"}]})
    out = export_page(editor.blocks)
    assert out.index("Do you offer support?") < out.index("Ask us") < out.index("</section>")
    assert 'href="/ask"' in out


def test_write_export(tmp_path):
    editor = _editor("footer")
    target = write_export(editor.blocks, tmp_path / "page.html")
    text = target.read_text(encoding="utf-8")
    assert text == export_page(editor.blocks)
    assert "© 2024 Zenith Builder." in text


def test_write_export_default_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = write_export(_editor("cta").blocks)
    assert target.name == config.EXPORT_FILENAME
    assert (tmp_path / config.EXPORT_FILENAME).exists()


def test_copy_block_html():
    block = new_block("video")
    out = copy_block_html(block)
    assert out.startswith('<section style="padding-top: 0rem; padding-bottom: 0rem;')
    assert out.endswith("</section>")
    assert 'src="https://www.youtube.com/embed/dQw4w9WgXcQ"' in out
    assert "id=" not in out.splitlines()[0]
