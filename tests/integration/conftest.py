"""Shared fixtures for integration tests: a small Logseq graph on disk"""

import pytest


JOURNAL_MD = """\
- Morning coffee, nothing to publish.
- [[Blog]]
  - type:: blog
    date:: 2026-01-17
    title:: Spring Plans
    author:: Jane
    status:: online
    header:: ![cover.jpeg](../assets/cover.jpeg)
  - ## Garden
    Tomatoes **first**, then beans.
  - ![bed](../assets/bed_1.png)
  - Ideas
    - compost
    - mulch
"""

DRAFT_PAGE_MD = """\
title:: Draft Notes
type:: blog
status:: draft
date:: 2024-01-01

- A
- B
"""

PLAIN_PAGE_MD = """\
# Reading list

- Some content without blog marker
"""


@pytest.fixture(name="graph")
def graph_fixture(tmp_path):
    """Logseq graph with one published journal post, one draft page, and one plain page."""
    root = tmp_path / "graph"
    for rel, text in [
        ("journals/2026_01_17.md", JOURNAL_MD),
        ("pages/Draft Notes.md", DRAFT_PAGE_MD),
        ("pages/Reading list.md", PLAIN_PAGE_MD),
    ]:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    assets = root / "assets"
    assets.mkdir()
    (assets / "cover.jpeg").write_bytes(b"jpeg-bytes")
    (assets / "bed_1.png").write_bytes(b"png-bytes")
    return root
