"""Data models for the parse and extract pipeline"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from blogpub.core.tree import OutlineNode


class PostFormat(str, Enum):
    """Annotation convention a post was extracted from"""
    nested_outline = "nested-outline"
    top_level = "top-level"


class PostMeta(BaseModel):
    """Recognized `key:: value` fields of a post; absent fields stay empty."""
    date:     str = ""
    title:    str = ""
    author:   str = ""
    header:   str = ""      # asset path taken from the header image reference
    status:   str = ""
    summary:  str = ""
    language: str = ""


class BlogPost(BaseModel):
    """One extracted post: metadata plus ordered content blocks."""
    meta:    PostMeta
    content: list[str] = []
    format:  PostFormat


@dataclass
class ParsedDoc:
    """Internal parse result carrying the outline tree; not persisted."""
    path:   Path
    source: str             # full file content
    tree:   OutlineNode
    hash:   str
