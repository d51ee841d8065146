"""Top-level posts: page properties as a root paragraph, content in the lists after it"""

import logging

from blogpub.core.extract.metadata import MARKER, derive_summary, parse_metadata
from blogpub.core.extract.text import reconstruct_text
from blogpub.core.models import BlogPost, PostFormat
from blogpub.core.tree import NodeKind, OutlineNode


logger = logging.getLogger(__name__)


def _is_nested_list(node: OutlineNode) -> bool:
    return node.parent is not None and node.parent.kind is NodeKind.list_item


def extract_top_level(tree: OutlineNode, source_lines: list[str]) -> list[BlogPost]:
    """Return a single post when a root paragraph carries the marker, else []."""
    metadata_lines: list[str] = []
    content: list[str] = []
    found_marker = False

    for node in tree.walk():
        if node.kind is NodeKind.paragraph and node.parent is tree and "::" in node.content:
            for line in node.content.split("\n"):
                if "::" in line:
                    metadata_lines.append(line)
                    found_marker = found_marker or MARKER in line
        elif found_marker and node.kind is NodeKind.list and not _is_nested_list(node):
            content.extend(reconstruct_text(item, source_lines) for item in node.children)

    if not found_marker:
        return []

    meta = parse_metadata(metadata_lines)
    logger.debug("Top-level post %r with %d block(s)", meta.title, len(content))
    return [BlogPost(meta=derive_summary(meta, content), content=content, format=PostFormat.top_level)]
