"""Indexed outline tree built from the markdown-it syntax tree"""

import re
from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from typing import Iterator, Optional

from markdown_it.tree import SyntaxTreeNode


LIST_MARKER_RE = re.compile(r'^([ \t]*(?:[-*+]|\d+[.)]))([ \t]*)')
TAB_WIDTH = 4


class NodeKind(str, Enum):
    """Node kinds the extraction engine distinguishes"""
    document = "document"
    list = "list"
    list_item = "list_item"
    paragraph = "paragraph"
    heading = "heading"
    other = "other"


KIND_MAP: dict[str, NodeKind] = {
    'root':         NodeKind.document,
    'bullet_list':  NodeKind.list,
    'ordered_list': NodeKind.list,
    'list_item':    NodeKind.list_item,
    'paragraph':    NodeKind.paragraph,
    'heading':      NodeKind.heading,
}

TEXT_KINDS = (NodeKind.paragraph, NodeKind.heading)


@dataclass(eq=False)
class OutlineNode:
    """A block-level node of a parsed document.

    `index` is assigned in pre-order while the tree is built and is stable for
    the lifetime of the tree; it is the node's identity for bookkeeping.
    Paragraphs and headings carry their inline source in `content`.
    """
    index:    int
    kind:     NodeKind
    type:     str = "root"                  # markdown-it node type
    content:  str = ""
    level:    Optional[int] = None          # heading level (1-6); None otherwise
    map:      Optional[tuple[int, int]] = None
    markup:   str = ""
    info:     str = ""
    children: list["OutlineNode"] = field(default_factory=list)
    parent:   Optional["OutlineNode"] = field(default=None, repr=False)

    @property
    def first_child(self) -> Optional["OutlineNode"]:
        return self.children[0] if self.children else None

    def walk(self) -> Iterator["OutlineNode"]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def own_text(self) -> str:
        """Text of this node's own paragraphs and headings, excluding nested blocks."""
        if self.kind in TEXT_KINDS:
            return self.content
        return "\n".join(c.content for c in self.children if c.kind in TEXT_KINDS)

    def text(self) -> str:
        """Text of every paragraph and heading in this subtree, one block per line."""
        if self.kind in TEXT_KINDS:
            return self.content
        return "\n".join(t for c in self.children if (t := c.text()))

    def raw(self, source_lines: list[str]) -> str:
        """Exact markdown source of this node, with list indentation removed."""
        if self.kind in TEXT_KINDS:
            return self.content
        if self.type == 'fence':
            return f"{self.markup}{self.info}\n{self.content}{self.markup}"
        if not self.map:
            return self.content.rstrip()

        start, end = self.map
        lines = source_lines[start:end]
        item = self.parent
        if lines and item is not None and item.kind is NodeKind.list_item and item.map:
            m = LIST_MARKER_RE.match(source_lines[item.map[0]])
            if m:
                offset = _content_offset(m, source_lines[item.map[0]])
                if item.map[0] == start:
                    # block opens on its list item's marker line
                    lines = [' ' * _columns(m.group(0)) + lines[0][m.end():]] + lines[1:]
                lines = [_strip_columns(line, offset) for line in lines]
        return ''.join(lines).strip('\n').rstrip()


def _columns(prefix: str) -> int:
    """Display width of a whitespace/marker prefix with tab stops every TAB_WIDTH columns."""
    col = 0
    for ch in prefix:
        col = col + TAB_WIDTH - col % TAB_WIDTH if ch == '\t' else col + 1
    return col


def _content_offset(m: re.Match, line: str) -> int:
    """Column where a list item's content starts, given LIST_MARKER_RE's match on its first line."""
    marker_end = _columns(m.group(1))
    gap = _columns(m.group(0)) - marker_end
    if gap == 0 or gap > 4 or not line[m.end():].strip():
        # empty item or indented code after the marker: content starts one column past it
        return marker_end + 1
    return marker_end + gap


def _strip_columns(line: str, width: int) -> str:
    """Remove up to width columns of leading whitespace; a tab crossing the limit leaves spaces."""
    col = 0
    for i, ch in enumerate(line):
        if col >= width or ch not in ' \t':
            return ' ' * (col - width) + line[i:]
        col = col + TAB_WIDTH - col % TAB_WIDTH if ch == '\t' else col + 1
    return ' ' * (col - width)


def _heading_level(tag: str) -> int | None:
    """Return heading level (1-6) from an 'hN' tag, else None."""
    if tag and tag[0] == 'h' and tag[1:].isdigit():
        return int(tag[1:])
    return None


def _inline_content(node: SyntaxTreeNode) -> str:
    return next((c.content for c in node.children if c.type == 'inline'), "")


def _convert(node: SyntaxTreeNode, parent: Optional[OutlineNode], counter) -> OutlineNode:
    if node.is_root:
        out = OutlineNode(index=next(counter), kind=NodeKind.document)
    else:
        kind = KIND_MAP.get(node.type, NodeKind.other)
        out = OutlineNode(
            index=next(counter),
            kind=kind,
            type=node.type,
            content=_inline_content(node) if kind in TEXT_KINDS else node.content,
            level=_heading_level(node.tag) if kind is NodeKind.heading else None,
            map=tuple(node.map) if node.map else None,
            markup=node.markup,
            info=node.info,
            parent=parent,
        )

    for child in node.children:
        if child.type == 'inline':
            continue
        out.children.append(_convert(child, out, counter))
    return out


def build_tree(tokens: list) -> OutlineNode:
    """Convert a markdown-it token stream into an indexed OutlineNode tree."""
    return _convert(SyntaxTreeNode(tokens), None, count())
