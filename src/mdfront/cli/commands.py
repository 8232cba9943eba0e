"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from mdfront.config import Settings, load_config
from mdfront.core.export import slug_for, unique_slug, write_sidecar
from mdfront.core.extract.blocks import extract_code_blocks
from mdfront.core.models import Document
from mdfront.core.parse import LoadError, discover_files, parse_file


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


def _load(path: str, settings: Settings) -> Document:
    try:
        return parse_file(Path(path), settings.sentinel, settings.encoding)
    except LoadError as e:
        _fail(str(e.path), e.cause)


def _load_all(path: str, settings: Settings) -> list[Document]:
    """Parse every markdown file under path; exit 1 when there is none."""
    files = discover_files(Path(path))
    if not files:
        typer.echo(f"No documents found under {path}.")
        raise typer.Exit(1)
    return [_load(str(p), settings) for p in files]


def meta_cmd(
    path: Annotated[str, typer.Argument(help="Document to read")],
    fmt: Annotated[str, typer.Option("--format", help="json or yaml")] = "json",
    ):
    """Print the front-matter metadata of a document."""
    settings = _settings()
    doc = _load(path, settings)
    if fmt == "json":
        typer.echo(json.dumps(dict(doc.metadata), indent=2, ensure_ascii=False))
    elif fmt == "yaml":
        typer.echo(yaml.safe_dump(dict(doc.metadata), sort_keys=False, allow_unicode=True), nl=False)
    else:
        _fail(f"Unknown format '{fmt}', expected json or yaml")


def body_cmd(
    path: Annotated[str, typer.Argument(help="Document to read")],
    ):
    """Print the document body exactly as stored after the front matter."""
    doc = _load(path, _settings())
    typer.echo(doc.body, nl=False, color=True)   # keep ANSI sequences when piped


def blocks_cmd(
    path: Annotated[str, typer.Argument(help="Document to read")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """List the code examples embedded in the document body."""
    settings = _settings(overrides={"parser_config": parser})
    doc = _load(path, settings)
    blocks = extract_code_blocks(doc.body, settings.parser_config)
    for b in blocks:
        typer.echo(f"  line {b.line}: {b.language or '-'}")
    typer.echo(f"{len(blocks)} code block(s) in {path}")


def check_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to check")],
    required: Annotated[Optional[list[str]], typer.Option("--require", help="Metadata key to require (repeatable)")] = None,
    ):
    """Report documents missing required metadata keys."""
    settings = _settings(overrides={"required_keys": required or None})
    docs = _load_all(path, settings)

    incomplete = 0
    for doc in docs:
        missing = [k for k in settings.required_keys if not doc.get(k)]
        if missing:
            incomplete += 1
            typer.echo(f"  {doc.path}: missing {', '.join(missing)}")
    typer.echo(f"Checked {len(docs)} document(s), {incomplete} incomplete")
    if incomplete:
        raise typer.Exit(1)


def export_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to export")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Write a sidecar JSON summary for each document."""
    settings = _settings(overrides={"output_dir": out, "parser_config": parser})
    output_dir = Path(settings.output_dir)
    docs = _load_all(path, settings)

    results = []
    taken: set[str] = set()
    try:
        for doc in docs:
            slug = unique_slug(slug_for(doc), taken)
            results.append((doc.path, write_sidecar(doc, output_dir, settings.parser_config, slug)))
    except OSError as e:
        _fail("Export failed", e)
    for src, json_path in results:
        typer.echo(f"  {src} -> {json_path}")
    typer.echo(f"Exported {len(results)} document(s) to {output_dir}/")
