"""CLI de Book Search (Typer + Rich).

Por qué la CLI captura errores y la librería no:
- La fachada propaga los fallos tal cual; decidir cómo mostrarlos es
  responsabilidad del llamador, y aquí el llamador es la terminal.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional
from xml.etree.ElementTree import ParseError

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_books_json
from cli import doctor
from cli.ui_components import build_books_table, build_error_panel, print_banner
from core.config import AppSettings
from core.domain.formats import ResponseFormat
from core.services.book_normalizer import MalformedResponseError
from core.services.book_search import fetch_books_by_author

app = typer.Typer(
    no_args_is_help=True,
    help="Search a bookseller API by author (JSON or XML responses).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _parse_format(value: Optional[str]) -> Optional[ResponseFormat]:
    if value is None:
        return None
    try:
        return ResponseFormat.from_name(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--format") from exc


@app.command()
def search(
    author: str = typer.Argument(..., help="Author to search for (e.g. Shakespeare)."),
    limit: int = typer.Option(10, "--limit", "-n", help="Maximum number of results requested."),
    response_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Response format: json or xml (default from config).",
    ),
    json_out: Optional[Path] = typer.Option(
        None,
        "--json-out",
        help="Also write the results to this JSON file.",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fetch books by author and print them as a table."""

    _configure_logging(verbose)
    settings = AppSettings()
    fmt = _parse_format(response_format) or settings.default_format

    if not no_banner:
        print_banner(_console)

    try:
        books = asyncio.run(fetch_books_by_author(author, limit, fmt, settings=settings))
    except (httpx.HTTPError, ParseError, MalformedResponseError) as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc

    _console.print(build_books_table(books, title=f"Books by {author} ({fmt.label()})"))

    if json_out is not None:
        path = export_books_json(books=books, output_path=json_out)
        _console.print(f"[green]Saved JSON to:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
