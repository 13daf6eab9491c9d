"""HTML CLI command -- collapsed stacks to an interactive flamegraph page."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import FlamefoldError
from ..logging_config import get_logger, setup_logging
from ..visualization import generate_page
from . import app
from ._common import console, read_lines, resolve_config

logger = get_logger(__name__)


@app.command()
def html(
    stacks: Path = typer.Argument(
        ...,
        help="Collapsed stack file, or - for stdin",
    ),
    output: Path = typer.Option(
        Path("flamegraph.html"),
        "--output",
        "-o",
        help="Output HTML file path",
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Page title (default: flamefold)",
    ),
    sort: Optional[bool] = typer.Option(
        None,
        "--sort/--no-sort",
        help="Sort lines by frame path before building (default: on)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Write a self-contained flamegraph page for collapsed stacks.

    The page loads d3-flame-graph from a CDN and supports zoom and search.

    [bold cyan]Examples:[/bold cyan]

      flamefold html perf.folded

      flamefold html perf.folded -o api.html --title "api server"
    """
    try:
        settings = resolve_config(
            config=config, sort=sort, title=title, verbose=verbose, quiet=quiet
        )
        setup_logging(settings.verbosity)

        lines = read_lines(stacks)

        page_path = generate_page(lines, output_path=str(output), config=settings)
        console.print(f"\nFlamegraph saved to: [bold green]{page_path}[/bold green]")

    except FlamefoldError as e:
        logger.debug("Page generation failed", exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
