"""CLI entry point - registers all subcommands."""

import typer

app = typer.Typer(
    name="flamefold",
    help="flamefold - turn collapsed stacks into flamegraph trees",
    add_completion=False,
    rich_markup_mode="rich",
)


def main() -> None:
    app()


# Import subcommands to register them
from .callback import main as _main_callback  # noqa: F401, E402
from .to_json import to_json as _to_json  # noqa: F401, E402
from .html import html as _html  # noqa: F401, E402
