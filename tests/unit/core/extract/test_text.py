"""Unit tests for core/extract/text.py"""

from blogpub.core.extract.text import reconstruct_text
from blogpub.core.tree import NodeKind, OutlineNode


def _item_text(first_item, md: str) -> str:
    return reconstruct_text(first_item(md), md.splitlines(keepends=True))


def test_inline_formatting_preserved(first_item):
    """Bold, links, and images are copied verbatim."""
    md = "- Some **bold**, a [link](https://example.com) and ![img](../assets/a.png)\n"
    assert _item_text(first_item, md) == "Some **bold**, a [link](https://example.com) and ![img](../assets/a.png)"


def test_multiline_paragraph(first_item):
    """Soft line breaks inside an item survive."""
    assert _item_text(first_item, "- Line one.\n  Line two.\n") == "Line one.\nLine two."


def test_heading_markers_restored(first_item):
    """A heading item gets its # markers back."""
    assert _item_text(first_item, "- ### Section title\n") == "### Section title"


def test_heading_followed_by_paragraph(first_item):
    """Heading and following paragraph are separated by a newline."""
    md = "- ## Garden\n  Tomatoes **first**.\n"
    assert _item_text(first_item, md) == "## Garden\nTomatoes **first**."


def test_nested_list_flattened(first_item):
    """Nested items at any depth become one level of * bullets."""
    md = "- Intro\n  - one\n  - two\n    - deep\n"
    assert _item_text(first_item, md) == "Intro\n\n* one\n* two\n* deep"


def test_nested_list_item_formatting_kept(first_item):
    """Bullet text keeps its inline markup."""
    md = "- Links\n  - see [docs](https://example.com)\n"
    assert _item_text(first_item, md) == "Links\n\n* see [docs](https://example.com)"


def test_text_after_nested_list(first_item):
    """Paragraphs after a nested list follow the bullets."""
    md = "- Intro\n  - one\n\n  Outro\n"
    assert _item_text(first_item, md) == "Intro\n\n* one\n\nOutro"


def test_code_block_kept(first_item):
    """Fenced code inside an item is emitted with its fence."""
    md = "- Example:\n\n  ```sh\n  ls -la\n  ```\n"
    assert _item_text(first_item, md) == "Example:\n```sh\nls -la\n```"


def test_item_without_children():
    """An empty node reconstructs to an empty string."""
    assert reconstruct_text(OutlineNode(index=0, kind=NodeKind.list_item), []) == ""


def test_blockquote_on_marker_line(first_item):
    """Continuation lines of a quote opening on the marker line lose the item indent."""
    md = "- > quoted **x**\n  > more\n"
    assert _item_text(first_item, md) == "> quoted **x**\n> more"


def test_indented_code_keeps_indent(first_item):
    """An indented code block keeps its four-space indent relative to the item."""
    md = "- Example\n\n      code line\n        more\n"
    assert _item_text(first_item, md) == "Example\n    code line\n      more"


def test_tab_indented_quote(first_item):
    """Tab indentation is removed up to the item's content column."""
    md = "- Intro\n  - > a\n\t> b\n"
    item = first_item(md)
    nested_item = item.children[1].children[0]
    assert reconstruct_text(nested_item, md.splitlines(keepends=True)) == "> a\n> b"


def test_nested_fence_item_kept(first_item):
    """A nested item holding only a fence keeps the fence inside its bullet."""
    md = "- Intro\n  - ```\n    x\n    ```\n"
    assert _item_text(first_item, md) == "Intro\n\n* ```\n  x\n  ```"


def test_nested_quote_item_kept(first_item):
    md = "- Intro\n  - > cited\n"
    assert _item_text(first_item, md) == "Intro\n\n* > cited"
