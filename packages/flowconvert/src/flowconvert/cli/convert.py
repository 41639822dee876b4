from __future__ import annotations

from pathlib import Path

import typer

from flowconvert.cli.utils import print_json
from flowconvert.services import convert_all


def command(
    directory: Path | None = typer.Option(None, "--dir", help="Export directory to scan"),
    parser: str | None = typer.Option(
        None, "--parser", help="Parser entry point name or module:attr"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    debug: bool = typer.Option(False, "--debug", help="Log ignored files and skipped outputs"),
    json_output: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    try:
        result = convert_all(directory=directory, parser=parser, verbose=verbose, debug=debug)
    except ValueError as err:
        typer.echo(f"error: {err}")
        raise typer.Exit(code=1) from None

    if json_output:
        print_json(result)
        return

    typer.echo(
        f"Converted {result.sessions} sessions: {result.succeeded} succeeded, "
        f"{result.failed} failed, {result.skipped} skipped."
    )
