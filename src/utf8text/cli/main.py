"""Typer-based command line interface for utf8text."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import structlog
import typer

from ..codec import decode_all, encode_all, is_conformant_utf8
from ..config import AppConfig, load_config
from ..logging import configure_logging
from ..scanner import Scanner
from ..substring import character_substring, codepoint_substring
from ..utils.text import format_codepoint
from ..utils.validation import parse_codepoint

app = typer.Typer(help="utf8text command line interface")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level())
    logger.debug("cli.config", path=str(config) if config else None, width_table=ctx.obj.width.table)


def _scanner(config: AppConfig) -> Scanner:
    try:
        return Scanner(config=config.scanner_config())
    except KeyError as exc:
        typer.echo(exc.args[0], err=True)
        raise typer.Exit(code=2)


@app.command()
def info(ctx: typer.Context, path: Path = typer.Argument(..., exists=True, readable=True)) -> None:
    """Report size, codepoint count, character count, width and validity."""
    metrics = _scanner(ctx.obj).measure(path.read_bytes())
    typer.echo(json.dumps(asdict(metrics), indent=2))


@app.command()
def substring(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True),
    pos: int = typer.Option(0, "--pos", min=0, help="First character (or codepoint) to keep"),
    count: Optional[int] = typer.Option(None, "--count", min=0, help="Maximum characters (or codepoints)"),
    codepoints: bool = typer.Option(False, "--codepoints", help="Index by codepoint instead of character"),
) -> None:
    """Write a substring of the file to stdout as raw bytes."""
    scanner = _scanner(ctx.obj)
    data = path.read_bytes()
    extract = codepoint_substring if codepoints else character_substring
    result = extract(data, pos, count, scanner=scanner)
    logger.debug("cli.substring", pos=pos, count=count, codepoints=codepoints, size=len(result))
    typer.echo(result, nl=False)


@app.command()
def decode(path: Path = typer.Argument(..., exists=True, readable=True)) -> None:
    """Print the codepoints of the file as a JSON list."""
    values = [format_codepoint(codepoint) for codepoint in decode_all(path.read_bytes())]
    typer.echo(json.dumps(values))


@app.command()
def encode(values: List[str] = typer.Argument(..., metavar="CODEPOINT...")) -> None:
    """Write the UTF-8 encoding of the given codepoints to stdout."""
    try:
        parsed = [parse_codepoint(value) for value in values]
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    typer.echo(encode_all(parsed), nl=False)


@app.command()
def validate(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True),
    strict: bool = typer.Option(False, "--strict", help="Also reject overlong forms and surrogates"),
) -> None:
    data = path.read_bytes()
    valid = is_conformant_utf8(data) if strict else _scanner(ctx.obj).is_valid_utf8(data)
    typer.echo("valid" if valid else "invalid")
    if not valid:
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
