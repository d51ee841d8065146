"""Unit tests for core/parse.py"""

from blogpub.core.models import ParsedDoc
from blogpub.core.parse import discover_files, parse_file, parse_text
from blogpub.core.tree import NodeKind
from blogpub.core.utils.hashing import sha256


def test_discover_files_single(tmp_path):
    """discover_files returns a list with one file when given a file path."""
    f = tmp_path / "2026_01_17.md"
    f.write_text("- note")
    assert discover_files(f) == [f]


def test_discover_files_non_md_skipped(tmp_path):
    """discover_files ignores non-.md files."""
    (tmp_path / "notes.org").write_text("* org")
    (tmp_path / "image.png").write_bytes(b"\x89PNG")
    assert discover_files(tmp_path) == []


def test_discover_files_graph(tmp_path):
    """journals/ and pages/ are searched; logseq/ and hidden folders are not."""
    for rel in ["journals/2026_01_17.md", "pages/Spring.md", "logseq/custom.md",
                "logseq/bak/pages/Spring.md", ".recycle/old.md"]:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("- x")
    files = discover_files(tmp_path)
    assert [f.relative_to(tmp_path).as_posix() for f in files] == [
        "journals/2026_01_17.md",
        "pages/Spring.md",
    ]


def test_parse_text_builds_tree():
    """parse_text returns the outline tree root."""
    tree = parse_text("- a\n")
    assert tree.kind is NodeKind.document
    assert tree.children[0].kind is NodeKind.list


def test_parse_file(tmp_path):
    """parse_file keeps the source text, its hash, and the outline tree."""
    f = tmp_path / "page.md"
    raw = "type:: blog\n\n- Body\n"
    f.write_text(raw, encoding="utf-8")
    doc = parse_file(f)
    assert isinstance(doc, ParsedDoc)
    assert doc.source == raw
    assert doc.hash == sha256(raw)
    assert doc.path == f
    assert [c.kind for c in doc.tree.children] == [NodeKind.paragraph, NodeKind.list]


def test_parse_file_preset(tmp_path):
    """A different markdown-it preset can be selected."""
    f = tmp_path / "page.md"
    f.write_text("- a\n", encoding="utf-8")
    doc = parse_file(f, "zero")
    assert doc.tree.kind is NodeKind.document
