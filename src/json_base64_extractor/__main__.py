"""Main CLI entry point for json-base64-extractor.

This module provides a command-line interface using Typer around an
`ExtractionSession`:
1.  Loading configuration (environment / `.env`).
2.  Reading raw JSON text from a file or stdin.
3.  Running the extraction pipeline (sanitize, parse, extract, dedupe,
    redact, serialize).
4.  Emitting the cleaned document and, optionally, the individual payloads.

It also exposes the secondary image-to-base64 path and clipboard copying.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv

from .config import get_settings
from .errors import FileReadError
from .extraction.orchestrator import ExtractionSession
from .image_encoder import encode_image_file, strip_data_url_prefix
from .models.extraction import RunOutcome

# Load .env file if present (before any config access)
_env_file = find_dotenv(usecwd=True)
if _env_file:
    load_dotenv(_env_file)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Extract embedded base64 image payloads from JSON documents")


def _read_input(source: Optional[Path]) -> str:
    """Read raw text from `source`, or from stdin when omitted or '-'."""
    if source is None or str(source) == "-":
        return sys.stdin.read()
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed reading input %s: %s", source, e)
        raise FileReadError(f"cannot read {source}: {e}") from e


def _session() -> ExtractionSession:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    return ExtractionSession.from_settings(settings)


def _run_or_exit(session: ExtractionSession, source: Optional[Path]) -> RunOutcome:
    try:
        text = _read_input(source)
    except FileReadError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    outcome = session.run(text)
    typer.echo(outcome.message, err=True)
    if not outcome.ok:
        raise typer.Exit(code=1)
    return outcome


@app.callback()
def main() -> None:  # pragma: no cover - simple callback
    """json-base64-extractor CLI.

    Use a subcommand like 'extract' to process a document.
    """
    pass


@app.command(help="Extract payloads and print the cleaned JSON document.")
def extract(
    source: Optional[Path] = typer.Argument(
        None, help="JSON file to read (stdin when omitted or '-')"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write cleaned JSON to this file instead of stdout"
    ),
    payload_dir: Optional[Path] = typer.Option(
        None, help="Directory to write each distinct payload to as payload_<id>.txt"
    ),
    show_payloads: bool = typer.Option(
        False,
        "--show-payloads/--no-show-payloads",
        help="Also print each distinct payload (id<TAB>value) after the cleaned JSON",
    ),
) -> None:
    session = _session()
    outcome = _run_or_exit(session, source)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(outcome.cleaned_json + "\n", encoding="utf-8")
        logger.info("Wrote cleaned JSON to %s", output)
    else:
        typer.echo(outcome.cleaned_json)

    if payload_dir is not None:
        payload_dir.mkdir(parents=True, exist_ok=True)
        for item in outcome.items:
            (payload_dir / f"payload_{item.id}.txt").write_text(item.value, encoding="utf-8")
        logger.info("Wrote %d payload(s) to %s", len(outcome.items), payload_dir)

    if show_payloads:
        for item in outcome.items:
            typer.echo(f"{item.id}\t{item.value}")


@app.command(help="Print one distinct payload by its zero-based index.")
def payload(
    source: Path = typer.Argument(..., help="JSON file to read ('-' for stdin)"),
    index: int = typer.Argument(..., help="Zero-based payload index after deduplication"),
) -> None:
    session = _session()
    _run_or_exit(session, source)
    item = session.get_item(index)
    if item is None:
        typer.echo(f"No payload at index {index} ({len(session.items)} available)", err=True)
        raise typer.Exit(code=1)
    typer.echo(item.value)


@app.command("encode-image", help="Encode an image file as a base64 data URL.")
def encode_image(
    image: Path = typer.Argument(..., help="Image file to encode"),
    raw: bool = typer.Option(
        False, "--raw/--data-url", help="Print only the base64 payload without the data URL header"
    ),
) -> None:
    logging.basicConfig(level=get_settings().LOG_LEVEL)
    try:
        data_url = encode_image_file(image)
    except FileReadError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(strip_data_url_prefix(data_url) if raw else data_url)


@app.command(help="Copy a payload (or the cleaned JSON) to the clipboard.")
def copy(
    source: Path = typer.Argument(..., help="JSON file to read ('-' for stdin)"),
    index: Optional[int] = typer.Option(
        None, help="Payload index to copy; the cleaned JSON is copied when omitted"
    ),
) -> None:
    session = _session()
    _run_or_exit(session, source)
    copied = session.copy_item(index) if index is not None else session.copy_cleaned_json()
    if not copied:
        typer.echo("Copy failed", err=True)
        raise typer.Exit(code=1)
    typer.echo("Copied to clipboard", err=True)


if __name__ == "__main__":  # pragma: no cover
    app()
