"""CLI de importación (Typer).

Uso:
    xword-importer <puzzle-date> [--output-dir DIR] [--no-upload] [--verbose]

Todos los errores terminan el proceso con exit code 1; no hay reintentos.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.http_client import build_client
from cli.ui_components import build_summary_panel, configure_logging
from core.config import AppSettings
from core.domain.errors import ImporterError, UpstreamHTTPError
from core.domain.puzzle_date import is_valid_puzzle_date
from core.services.import_pipeline import ImportRequest, PipelineHooks, run_import

USAGE = "Usage: xword-importer <puzzle-date>"

app = typer.Typer(
    add_completion=False,
    help="Import a daily crossword as .ipuz and upload it to squares.io.",
)

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


def _fail(message: str) -> typer.Exit:
    _err_console.print(message, markup=False, highlight=False)
    return typer.Exit(code=1)


@app.command(context_settings={"allow_extra_args": True})
def main(
    ctx: typer.Context,
    puzzle_date: Optional[str] = typer.Argument(
        None,
        metavar="PUZZLE_DATE",
        help="Puzzle date in YYYY-MM-DD format.",
        show_default=False,
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the .ipuz file (default: puzzles/).",
    ),
    no_upload: bool = typer.Option(False, "--no-upload", help="Only write the .ipuz file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Fetch the crossword for PUZZLE_DATE, convert it and upload it."""

    if puzzle_date is None or ctx.args:
        raise _fail(USAGE)
    if not is_valid_puzzle_date(puzzle_date):
        raise _fail('Puzzle date must have format "YYYY-MM-DD"')

    configure_logging(_err_console, verbose=verbose)

    hooks = PipelineHooks(
        assembled=lambda document: _console.print(build_summary_panel(document)),
        written=lambda path: _console.print(f"Wrote {path.as_posix()}", markup=False, highlight=False),
        uploading=lambda: _console.print("Uploading to squares.io...", markup=False, highlight=False),
    )
    request = ImportRequest(
        puzzle_date=puzzle_date,
        output_dir=output_dir,
        upload=False if no_upload else None,
    )

    try:
        settings = AppSettings()
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise _fail(f"Invalid configuration: {field}: {error['msg']}") from exc

    try:
        with build_client(settings) as client:
            result = run_import(request, client=client, settings=settings, hooks=hooks)
    except UpstreamHTTPError as exc:
        raise _fail(f"{exc}\nDid you enter the date correctly?") from exc
    except ImporterError as exc:
        raise _fail(str(exc)) from exc
    except httpx.HTTPError as exc:
        raise _fail(f"HTTP request failed: {exc}") from exc
    except OSError as exc:
        raise _fail(f"Could not write puzzle file: {exc}") from exc

    if result.view_url:
        _console.print(f"Puzzle uploaded! View it at {result.view_url}", markup=False, highlight=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
