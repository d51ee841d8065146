"""Nested-outline posts: a marked list item holding metadata, siblings holding content.

    - [[Travel]]                       <- optional category wrappers
      - [[Blog]]
        - type:: blog                  <- metadata item
          title:: Spring
        - First content block          <- one content block per sibling item
        - Second content block
"""

import logging
from dataclasses import dataclass, field

from blogpub.core.extract.metadata import MARKER, derive_summary, parse_metadata
from blogpub.core.extract.text import reconstruct_text
from blogpub.core.models import BlogPost, PostFormat
from blogpub.core.tree import NodeKind, OutlineNode


logger = logging.getLogger(__name__)


@dataclass
class _WalkContext:
    """State carried through one document walk."""
    processed: set[int] = field(default_factory=set)    # node indices already extracted
    posts:     list[BlogPost] = field(default_factory=list)


def resolve_post_list(list_node: OutlineNode) -> list[OutlineNode] | None:
    """Descend through single-list wrapper items to the list that holds the post.

    Returns the chain of lists from list_node down to the post list, or None
    when no first item along the way carries the marker in its own text.
    """
    chain = [list_node]
    current = list_node
    while True:
        first = current.first_child
        if first is None:
            return None
        if MARKER in first.own_text():
            return chain
        nested = [c for c in first.children if c.kind is NodeKind.list]
        if len(nested) != 1:
            return None
        current = nested[0]
        chain.append(current)


def _extract_post(post_list: OutlineNode, source_lines: list[str]) -> BlogPost:
    first, *rest = post_list.children
    meta = parse_metadata(first.text().split("\n"))
    content = [reconstruct_text(item, source_lines) for item in rest]
    return BlogPost(meta=derive_summary(meta, content), content=content, format=PostFormat.nested_outline)


def _visit_list(list_node: OutlineNode, source_lines: list[str], ctx: _WalkContext) -> None:
    first = list_node.first_child
    if first is None or MARKER not in first.text():
        return

    chain = resolve_post_list(list_node)
    if chain is None:
        logger.debug("List %d mentions the marker but has no post boundary", list_node.index)
        return
    post_list = chain[-1]
    if post_list.index in ctx.processed:
        return

    post = _extract_post(post_list, source_lines)
    logger.debug("Nested post %r with %d block(s)", post.meta.title, len(post.content))
    ctx.posts.append(post)

    ctx.processed.update(n.index for n in chain)
    ctx.processed.update(n.index for n in post_list.walk() if n.kind is NodeKind.list)


def extract_nested(tree: OutlineNode, source_lines: list[str]) -> list[BlogPost]:
    """Extract every marked outline list in tree, in document order."""
    ctx = _WalkContext()
    for node in tree.walk():
        if node.kind is NodeKind.list and node.index not in ctx.processed:
            _visit_list(node, source_lines, ctx)
    return ctx.posts
