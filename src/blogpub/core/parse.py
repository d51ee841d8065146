"""File discovery and markdown-it parsing into outline trees"""

from pathlib import Path

from markdown_it import MarkdownIt

from blogpub.core.models import ParsedDoc
from blogpub.core.tree import OutlineNode, build_tree
from blogpub.core.utils.hashing import sha256


MD_EXTENSIONS = {'.md'}
SKIP_DIRS = {'logseq', 'bak'}      # Logseq's own config and backup folders


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _skipped(path: Path, root: Path) -> bool:
    """True if any directory between root and path is hidden or Logseq-internal."""
    return any(part.startswith('.') or part in SKIP_DIRS for part in path.relative_to(root).parts[:-1])


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS and not _skipped(p, path))


def parse_text(text: str, parser_config: str = 'commonmark') -> OutlineNode:
    """Tokenize markdown text and return its outline tree."""
    return build_tree(_make_parser(parser_config).parse(text))


def parse_file(path: Path, parser_config: str = 'commonmark') -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc with its outline tree."""
    source = path.read_text(encoding='utf-8')
    return ParsedDoc(
        path=path,
        source=source,
        tree=parse_text(source, parser_config),
        hash=sha256(source),
    )
