"""Top-level options shared by every subcommand."""

import typer

from . import app
from ._common import console


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Convert collapsed stack samples into flamegraph call trees.

    Input lines look like [bold]frame1;frame2;frame3 42[/bold]. Counts that
    are missing or unreadable default to 1.

    [bold cyan]Examples:[/bold cyan]

      flamefold json perf.folded -o stacks.json

      flamefold html perf.folded --title "api server"

      perf script | stackcollapse-perf.pl | flamefold json -
    """
    if version:
        from .. import __version__

        console.print(f"[bold cyan]flamefold[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)
