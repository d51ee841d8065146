"""Run every post extraction strategy over one document"""

import logging
from typing import Callable

from blogpub.core.extract.nested import extract_nested
from blogpub.core.extract.toplevel import extract_top_level
from blogpub.core.models import BlogPost, ParsedDoc, PostFormat
from blogpub.core.tree import OutlineNode


logger = logging.getLogger(__name__)

Extractor = Callable[[OutlineNode, list[str]], list[BlogPost]]

# Fixed order: results are returned nested-outline first, then top-level.
STRATEGIES: tuple[tuple[PostFormat, Extractor], ...] = (
    (PostFormat.nested_outline, extract_nested),
    (PostFormat.top_level,      extract_top_level),
)


def _same_post(a: BlogPost, b: BlogPost) -> bool:
    """True if a and b are one post seen through two conventions.

    Both must carry the same non-empty title and date, and one's content
    blocks must all appear in the other's.
    """
    if not (a.meta.title and a.meta.date):
        return False
    if (a.meta.title, a.meta.date) != (b.meta.title, b.meta.date):
        return False
    return set(a.content) <= set(b.content) or set(b.content) <= set(a.content)


def extract_posts(tree: OutlineNode, source: str) -> list[BlogPost]:
    """Return all posts found in tree, in strategy order then document order.

    A post already produced by another strategy (see `_same_post`) is
    dropped, so a document using both conventions for one post yields it once.
    """
    source_lines = source.splitlines(keepends=True)
    posts: list[BlogPost] = []

    for fmt, extractor in STRATEGIES:
        earlier = [p for p in posts if p.format is not fmt]
        for post in extractor(tree, source_lines):
            dup = next((p for p in earlier if _same_post(p, post)), None)
            if dup is not None:
                logger.info("Skipping %s post %r: already extracted as %s", fmt.value, post.meta.title, dup.format.value)
                continue
            posts.append(post)

    return posts


def extract_doc(parsed: ParsedDoc) -> list[BlogPost]:
    """Extract posts from a ParsedDoc."""
    posts = extract_posts(parsed.tree, parsed.source)
    logger.debug("%s: %d post(s)", parsed.path, len(posts))
    return posts
