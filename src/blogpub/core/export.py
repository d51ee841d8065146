"""Hugo page bundle output: bundle naming, front matter, and index file writing"""

from pathlib import Path

import yaml

from blogpub.core.models import PostMeta


LANGUAGE_CODES: dict[str, str] = {
    'german':  'de',
    'english': 'en',
    'spanish': 'es',
    'french':  'fr',
    'italian': 'it',
}


def language_code(language: str, default: str = 'de') -> str:
    """Map a language name or code to its two-letter code; unknown -> default."""
    lang = language.strip().lower()
    if lang in LANGUAGE_CODES.values():
        return lang
    return LANGUAGE_CODES.get(lang, default)


def index_filename(language: str, default: str = 'de') -> str:
    """Return the bundle index filename for a language tag, e.g. 'index.en.md'."""
    return f"index.{language_code(language, default)}.md"


def bundle_name(meta: PostMeta) -> str:
    """Return the page bundle directory name: '<date>_<Title_With_Underscores>'."""
    return f"{meta.date}_{meta.title.replace(' ', '_')}"


def build_body(blocks: list[str]) -> str:
    """Join non-empty content blocks with blank lines."""
    return "\n\n".join(b.strip() for b in blocks if b.strip())


def build_front_matter(meta: PostMeta) -> str:
    """Return the YAML front matter block (with --- delimiters) for meta."""
    fm = {
        'date': meta.date,
        'lastmod': meta.date,
        'draft': False,
        'title': meta.title,
        'summary': meta.summary,
        'params': {'author': meta.author},
    }
    header = yaml.dump(fm, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n"


def build_page(meta: PostMeta, body: str) -> str:
    return f"{build_front_matter(meta)}\n{body}\n"


def write_post(meta: PostMeta, body: str, bundle_dir: Path, default_language: str = 'de') -> Path:
    """Write the bundle index file for a post and return its path."""
    bundle_dir.mkdir(parents=True, exist_ok=True)
    index_path = bundle_dir / index_filename(meta.language, default_language)
    index_path.write_text(build_page(meta, body), encoding='utf-8')
    return index_path
