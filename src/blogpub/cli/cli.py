"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from blogpub.cli.commands import convert_cmd, extract_cmd, init_cmd, list_cmd
from blogpub.config import load_config


app = typer.Typer(name="blogpub", no_args_is_help=True, help="Logseq outline notes to Hugo blog posts")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress at INFO level")] = False,
    ):
    """Configure logging before any command runs."""
    try:
        level = load_config().log_level
    except ValueError:
        level = "WARNING"
    logging.basicConfig(
        level=logging.INFO if verbose else level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app.command(name="convert")(convert_cmd)
app.command(name="extract")(extract_cmd)
app.command(name="init")(init_cmd)
app.command(name="list")(list_cmd)
