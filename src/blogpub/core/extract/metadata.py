"""`key:: value` metadata parsing and summary derivation"""

import re
from typing import Iterable

from blogpub.core.models import PostMeta


MARKER = "type:: blog"
METADATA_RE = re.compile(r'(\w+)::\s*(.*)')
PATH_RE = re.compile(r'\((.*?)\)')

FIELDS = {'date', 'title', 'author', 'header', 'status', 'summary', 'language'}


def extract_path(raw: str) -> str:
    """Return the path inside the first (...) of an image reference, else raw."""
    m = PATH_RE.search(raw)
    return m.group(1) if m else raw


def parse_metadata(lines: Iterable[str]) -> PostMeta:
    """Build a PostMeta from raw lines; unknown keys and non-matching lines are ignored."""
    values: dict[str, str] = {}
    for line in lines:
        m = METADATA_RE.search(line)
        if not m or m.group(1) not in FIELDS:
            continue
        key, value = m.group(1), m.group(2).strip()
        values[key] = extract_path(value) if key == 'header' else value
    return PostMeta(**values)


def derive_summary(meta: PostMeta, content: list[str]) -> PostMeta:
    """Fill an undeclared summary from the first content block, newlines flattened."""
    if meta.summary or not content:
        return meta
    return meta.model_copy(update={"summary": content[0].replace("\n", " ")})
