"""Report command: read lint results and print the formatted report."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .. import __version__
from ..api import build_styler, exit_code
from ..config import load_config
from ..exceptions import LintReportError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import STDIN, err_console, read_input

logger = get_logger(__name__)

# Exit statuses
EXIT_CLEAN = 0
EXIT_TOOL_ERROR = 2
EXIT_INTERRUPTED = 130


@app.command()
def report(
    results_file: str = typer.Argument(
        STDIN,
        metavar="RESULTS",
        help="JSON file with lint results, or - for stdin",
    ),
    formatter: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Force colored output on or off (default: detect terminal)",
        show_default=False,
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
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        is_eager=True,
    ),
):
    """
    Render linter results as a stylish console report.

    Exits with status 1 when any file reports errors, 2 when the results
    or configuration can't be used.

    [bold cyan]Examples:[/bold cyan]

      lint-report results.json

      sass-lint -f json | lint-report --no-color
    """
    if version:
        typer.echo(f"lint-report {__version__}")
        raise typer.Exit(EXIT_CLEAN)

    try:
        settings = load_config(
            config_file=config,
            formatter=formatter,
            color=color,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
        )
        logger.debug(f"Settings: {settings}")

        results = read_input(results_file)
        fmt = get_formatter(settings.formatter, styler=build_styler(settings.color))
        output = fmt.format(results)

    except LintReportError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(EXIT_TOOL_ERROR)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        raise typer.Exit(EXIT_INTERRUPTED)

    # The styler already decided on color; never let click strip it
    typer.echo(output, nl=False, color=True)
    raise typer.Exit(exit_code(results))
