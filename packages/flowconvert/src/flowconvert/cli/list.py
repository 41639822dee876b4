from __future__ import annotations

from pathlib import Path

import typer

from flowconvert.cli.utils import print_json
from flowconvert.core import AppConfig, LoggingSink
from flowconvert.services import discover_sessions


def command(
    directory: Path | None = typer.Option(None, "--dir", help="Export directory to scan"),
    json_output: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    try:
        export_dir = directory or AppConfig.load().export_dir
    except ValueError as err:
        typer.echo(f"error: {err}")
        raise typer.Exit(code=1) from None

    sessions = discover_sessions(export_dir, LoggingSink())
    if json_output:
        print_json(sessions)
        return

    if not sessions:
        typer.echo("No sessions found.")
        return

    for session in sessions:
        typer.echo(session)
