"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated, Optional

import typer

from mdfront.cli.commands import blocks_cmd, body_cmd, check_cmd, export_cmd, meta_cmd
from mdfront.config import load_config


app = typer.Typer(name="mdfront", no_args_is_help=True, help="Front-matter document loader")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Configure logging before any command runs."""
    try:
        level = load_config(overrides={"log_level": log_level}).log_level
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


app.command(name="meta")(meta_cmd)
app.command(name="body")(body_cmd)
app.command(name="blocks")(blocks_cmd)
app.command(name="check")(check_cmd)
app.command(name="export")(export_cmd)
