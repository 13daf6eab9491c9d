"""JSON CLI command -- collapsed stacks to d3-flame-graph JSON."""

from pathlib import Path
from typing import Optional

import typer

from ..collapse import build_tree, sort_lines, tree_to_json
from ..exceptions import FileAccessError, FlamefoldError
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import console, read_lines, resolve_config

logger = get_logger(__name__)


@app.command("json")
def to_json(
    stacks: Path = typer.Argument(
        ...,
        help="Collapsed stack file, or - for stdin",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file path (default: stdout)",
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
    Fold collapsed stacks into a [bold]{name, value, children}[/bold] tree.

    Every node's value is the number of samples passing through it, so the
    root holds the total sample count.

    [bold cyan]Examples:[/bold cyan]

      flamefold json perf.folded

      flamefold json perf.folded -o stacks.json --no-sort
    """
    try:
        settings = resolve_config(config=config, sort=sort, verbose=verbose, quiet=quiet)
        setup_logging(settings.verbosity)

        lines = read_lines(stacks)
        if settings.sort_input:
            lines = sort_lines(lines)

        tree = build_tree(lines, skip_comments=settings.skip_comments)
        data = tree_to_json(tree)
        logger.info(
            "Folded %d samples into %d nodes, max depth %d",
            tree.total,
            len(tree),
            tree.max_depth,
        )

        if output is None:
            typer.echo(data)
        else:
            try:
                output.write_text(data, encoding="utf-8")
            except OSError as e:
                raise FileAccessError(output, e.strerror or str(e)) from e
            console.print(f"JSON saved to: [bold green]{output}[/bold green]")

    except FlamefoldError as e:
        logger.debug("Conversion failed", exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
