"""CLI entry point: registers the report command."""

import typer

app = typer.Typer(
    name="lint-report",
    help="lint-report - render linter results as a console report",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .report import report as _report  # noqa: F401, E402
