from __future__ import annotations

import typer

from flowconvert.cli import convert as convert_cmd
from flowconvert.cli import list as list_cmd

app = typer.Typer(add_completion=False)

app.command("convert")(convert_cmd.command)
app.command("list")(list_cmd.command)


if __name__ == "__main__":
    app()
