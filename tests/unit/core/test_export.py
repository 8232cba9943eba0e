"""Unit tests for core/export.py"""

import json

from mdfront.core.export import (
    build_document,
    build_frontmatter,
    build_sidecar,
    slug_for,
    unique_slug,
    write_sidecar,
)
from mdfront.core.models import Document
from mdfront.core.parse import parse
from mdfront.core.utils.text import body_hash


def test_build_frontmatter_empty():
    assert build_frontmatter({}) == ""


def test_build_frontmatter_lines():
    assert build_frontmatter({"title": "X", "date": "2020"}) == "---\ntitle: X\ndate: 2020\n---\n"


def test_build_document_reparses_to_same(sample_post):
    doc = parse(sample_post)
    assert build_document(doc) == sample_post
    assert parse(build_document(doc)) == doc


def test_build_document_without_metadata():
    doc = Document(body="Hello")
    assert build_document(doc) == "Hello"


def test_build_frontmatter_empty_block():
    assert build_frontmatter({}, empty_block=True) == "---\n---\n"


def test_build_document_keeps_empty_block():
    """An empty block survives a rebuild, so a body starting with its own block re-parses the same."""
    text = "---\n---\n---\nx: y\n---\nbody"
    doc = parse(text)
    assert doc.body == "---\nx: y\n---\nbody"
    assert build_document(doc) == text
    assert parse(build_document(doc)) == doc


def test_unique_slug_suffixes_repeats():
    taken: set[str] = set()
    assert unique_slug("index", taken) == "index"
    assert unique_slug("index", taken) == "index-2"
    assert unique_slug("index", taken) == "index-3"
    assert taken == {"index", "index-2", "index-3"}


def test_write_sidecar_explicit_slug(tmp_path):
    out = write_sidecar(Document(body="x"), tmp_path, slug="index-2")
    assert out == tmp_path / "index-2.json"
    assert json.loads(out.read_text(encoding="utf-8"))["slug"] == "index-2"


def test_slug_for_prefers_explicit_slug():
    doc = Document(metadata={"slug": "Custom Slug", "title": "Other"})
    assert slug_for(doc) == "custom-slug"


def test_slug_for_title_then_stem():
    assert slug_for(Document(metadata={"title": "Structs & Attributes!"})) == "structs-attributes"
    assert slug_for(Document(path="posts/My_Post.md")) == "my-post"


def test_slug_for_fallback():
    assert slug_for(Document(metadata={"title": "!!!"})) == "document"


def test_build_sidecar(sample_post, sample_body):
    doc = parse(sample_post).model_copy(update={"path": "posts/attrs.md"})
    sidecar = build_sidecar(doc)
    assert sidecar["slug"] == "comparing-attribute-libraries"
    assert sidecar["path"] == "posts/attrs.md"
    assert sidecar["hash"] == body_hash(sample_body)
    assert sidecar["metadata"]["commit"] == "3f2a9c1"
    assert sidecar["tags"] == ["ruby", "structs"]
    assert sidecar["code_blocks"] == [{"line": 5, "language": "ruby"}, {"line": 11, "language": ""}]
    assert [h["text"] for h in sidecar["headings"]] == ["Ruby attribute libraries", "Dry::Struct"]


def test_build_sidecar_without_metadata():
    sidecar = build_sidecar(Document(body="plain\n"))
    assert sidecar["metadata"] == {}
    assert sidecar["tags"] == []
    assert sidecar["slug"] == "document"


def test_write_sidecar(tmp_path, sample_post):
    doc = parse(sample_post)
    out = write_sidecar(doc, tmp_path / "dist")
    assert out == tmp_path / "dist" / "comparing-attribute-libraries.json"
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["metadata"]["title"] == "Comparing attribute libraries"
