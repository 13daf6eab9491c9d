"""Shared CLI helpers."""

import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import FlameConfig, load_config
from ..exceptions import FileAccessError

console = Console(stderr=True)

STDIN = Path("-")


def resolve_config(
    config: Optional[Path] = None,
    sort: Optional[bool] = None,
    title: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> FlameConfig:
    """Build configuration from CLI options."""
    return load_config(
        config_file=config,
        sort_input=sort,
        title=title,
        verbose=verbose,
        quiet=quiet,
    )


def read_lines(source: Path) -> list[str]:
    """Read collapsed-stack lines from a file, or stdin for ``-``.

    Undecodable bytes are kept as surrogate escapes so they surface as a
    serialization error instead of failing the read.
    """
    if source == STDIN:
        data = sys.stdin.buffer.read()
        lines = data.decode("utf-8", errors="surrogateescape").splitlines()
    else:
        try:
            with open(source, encoding="utf-8", errors="surrogateescape") as f:
                lines = f.read().splitlines()
        except OSError as e:
            raise FileAccessError(source, e.strerror or str(e)) from e

    return lines
