"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from sqlmodel import Session, SQLModel

from blogpub.config import Settings, load_config
from blogpub.core.pipeline import run_convert, run_extract
from blogpub.crud.database import init_db, make_engine
from blogpub.crud.posts import get_all_posts


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_convert(results: list) -> None:
    """Print per-post status and a summary line."""
    counts: dict[str, int] = {}
    for status, src, bundle in results:
        counts[status] = counts.get(status, 0) + 1
        typer.echo(f"  {status}: {src}" + (f" -> {bundle}" if bundle else ""))
    summary = ", ".join(f"{n} {status}" for status, n in sorted(counts.items()))
    typer.echo(f"Convert complete - {summary}")


def convert_cmd(
    path: Annotated[str, typer.Argument(help="Journal/page file or Logseq graph directory")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Directory receiving page bundles")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    force: Annotated[bool, typer.Option("--force", help="Rewrite bundles even when unchanged")] = False,
    ):
    """Extract blog posts and write them as Hugo page bundles."""
    settings = _settings(overrides={"output_dir": out, "parser_config": parser})
    engine = make_engine(settings.db_url)
    init_db(engine)

    try:
        results = run_convert(engine, path, settings, Path(settings.output_dir), force)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        _fail(f"No markdown files found at {path}")
    if all(status == 'no-post' for status, _, _ in results):
        _fail("No blog post found with 'type:: blog' marker")
    _echo_convert(results)


def extract_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to extract from")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the posts found in path as JSON without writing anything."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        results = run_extract(path, settings.parser_config)
    except RuntimeError as e:
        _fail(str(e))
    payload = [
        {"source": str(src), "posts": [p.model_dump(mode="json") for p in posts]}
        for src, posts in results
    ]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate the ledger")] = False,
    ):
    """Initialize the conversion ledger. Use --reset to forget converted posts."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        SQLModel.metadata.drop_all(engine)
        typer.echo("Existing data cleared.")
    init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def list_cmd():
    """List posts recorded in the conversion ledger."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        posts = get_all_posts(session)
    if not posts:
        typer.echo("No converted posts found in database.")
        raise typer.Exit(1)
    for p in posts:
        typer.echo(f"{p.bundle}  <- {p.source_path}")
