"""Pipeline step functions: extract and convert orchestration"""

import logging
from datetime import datetime
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import Session

from blogpub.config import Settings
from blogpub.core.assets import process_content, process_header
from blogpub.core.export import build_body, build_page, bundle_name, index_filename, write_post
from blogpub.core.extract.extract import extract_doc
from blogpub.core.extract.metadata import MARKER
from blogpub.core.models import BlogPost
from blogpub.core.parse import discover_files, parse_file
from blogpub.core.utils.hashing import sha256
from blogpub.crud.posts import get_post, record_post


logger = logging.getLogger(__name__)


class NoPostFoundError(LookupError):
    """A document contains no post in either annotation convention."""


def run_extract(path: str, parser_config: str) -> list[tuple[Path, list[BlogPost]]]:
    """Parse path and extract posts without writing anything. Returns (source, posts) pairs."""
    results = []
    for p in discover_files(Path(path)):
        try:
            results.append((p, extract_doc(parse_file(p, parser_config))))
        except Exception as e:
            raise RuntimeError(f"Failed to extract {p}: {e}") from e
    return results


def _write_bundle(post: BlogPost, body: str, input_dir: Path, bundle_dir: Path, default_language: str) -> Path:
    """Copy assets into bundle_dir, rewrite their references, and write the index file."""
    bundle_dir.mkdir(parents=True, exist_ok=True)
    body = process_content(body, input_dir, bundle_dir)
    process_header(post.meta.header, input_dir, bundle_dir)
    return write_post(post.meta, body, bundle_dir, default_language)


def convert_file(
    session: Session,
    path: Path,
    settings: Settings,
    output_dir: Path,
    force: bool = False,
    converted_at: datetime | None = None,
    ) -> list[tuple[str, str]]:
    """Convert every post of one source file into a page bundle.

    Returns (status, bundle) pairs; status is 'created', 'updated', 'unchanged',
    or 'filtered' for posts whose status is not published.
    Raises NoPostFoundError when the file holds no post at all.
    """
    parsed = parse_file(path, settings.parser_config)
    posts = extract_doc(parsed)
    if not posts:
        raise NoPostFoundError(f"no blog post found with '{MARKER}' marker in {path}")

    results = []
    for post in posts:
        name = bundle_name(post.meta)
        if not settings.is_published(post.meta.status):
            logger.info("%s: skipping %r with status %r", path, post.meta.title, post.meta.status)
            results.append(('filtered', name))
            continue

        bundle_dir = output_dir / name
        body = build_body(post.content)
        page_hash = sha256(build_page(post.meta, body))
        index_path = bundle_dir / index_filename(post.meta.language, settings.default_language)

        existing = get_post(session, str(path), name)
        if not force and existing and existing.hash == page_hash and index_path.exists():
            results.append(('unchanged', name))
            continue

        out = _write_bundle(post, body, path.parent, bundle_dir, settings.default_language)
        _, status = record_post(session, {
            "source_path": str(path),
            "bundle": name,
            "title": post.meta.title,
            "date": post.meta.date,
            "hash": page_hash,
            "output_path": str(out),
        }, converted_at)
        # ledger hash matched but the bundle was rewritten (forced or index missing)
        results.append(('updated' if status == 'unchanged' else status, name))
    return results


def run_convert(
    engine: Engine,
    path: str,
    settings: Settings,
    output_dir: Path,
    force: bool = False,
    ) -> list[tuple[str, Path, str]]:
    """Convert every markdown file under path. Returns (status, source, bundle) triples.

    Files without a post are reported as ('no-post', source, '') and do not stop
    the run; any other failure is raised as RuntimeError naming the file.
    """
    files = discover_files(Path(path))
    if not files:
        return []

    converted_at = datetime.now()
    results = []
    with Session(engine) as session:
        for p in files:
            try:
                for status, name in convert_file(session, p, settings, output_dir, force, converted_at):
                    results.append((status, p, name))
            except NoPostFoundError:
                logger.info("%s: no post found", p)
                results.append(('no-post', p, ''))
            except Exception as e:
                raise RuntimeError(f"Failed to convert {p}: {e}") from e
        session.commit()
    return results
