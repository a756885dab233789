from __future__ import annotations

import os
from pathlib import Path

import typer

from tcr import __version__
from tcr.cli.commands.check import check
from tcr.cli.commands.store import clear, set_value, show, unset
from tcr.cli.context import PROJECT_ENV
from tcr.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(check)
app.command()(show)
app.command("set")(set_value)
app.command()(unset)
app.command()(clear)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    project: Path | None = typer.Option(
        None,
        "--project",
        "-P",
        help="Project directory (default: current directory)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if project is not None:
        try:
            root = project.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --project: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --project '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[PROJECT_ENV] = str(root)


def main() -> None:
    app()
