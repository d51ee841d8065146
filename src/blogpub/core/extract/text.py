"""Rebuild a content item's markdown from its outline subtree"""

from blogpub.core.tree import NodeKind, OutlineNode


def _item_line(item: OutlineNode, source_lines: list[str]) -> str:
    """Bullet text for an item: its paragraphs and headings, else its first block's source."""
    if text := item.own_text():
        return text
    block = next((c for c in item.children if c.kind is not NodeKind.list), None)
    if block is None:
        return ""
    # keep multi-line blocks (fences, quotes) inside the bullet
    return block.raw(source_lines).replace("\n", "\n  ")


def _flatten_items(list_node: OutlineNode, source_lines: list[str]) -> list[str]:
    """Text of every item under list_node, nested items included, in pre-order."""
    items = []
    for item in list_node.children:
        items.append(_item_line(item, source_lines))
        for child in item.children:
            if child.kind is NodeKind.list:
                items.extend(_flatten_items(child, source_lines))
    return items


def reconstruct_text(node: OutlineNode, source_lines: list[str]) -> str:
    """Return node's children as markdown, keeping inline formatting verbatim.

    Headings get their `#` markers back, nested lists are flattened to a single
    level of `* ` bullets, and everything else is copied from the source with
    its own indentation (e.g. indented code) intact.
    """
    parts = []
    for child in node.children:
        if child.kind is NodeKind.heading:
            parts.append(f"{'#' * (child.level or 1)} {child.content}")
        elif child.kind is NodeKind.list:
            parts.append("\n" + "".join(f"* {t}\n" for t in _flatten_items(child, source_lines)))
        else:
            parts.append(child.raw(source_lines))
    return "\n".join(parts).strip("\n").rstrip()
