"""Public API for lint-report.

Example:
    >>> from lint_report import format_results
    >>>
    >>> report = format_results(
    ...     [{"filePath": "a.scss", "errorCount": 0, "warningCount": 0, "messages": []}],
    ...     color=False,
    ... )
    >>> report
    ''
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from .formatters import get_formatter
from .logging_config import get_logger
from .models import FileResult, load_results, total_counts
from .styling import RichStyler, Styler

logger = get_logger(__name__)


def build_styler(color: Optional[bool] = None) -> Styler:
    """Build a styler with color forced on/off, or detected when None."""
    if color is None:
        return RichStyler.detect()
    return RichStyler(enabled=color)


def format_results(
    results: Sequence[Union[FileResult, dict[str, Any]]],
    formatter: str = "stylish",
    color: Optional[bool] = None,
    styler: Optional[Styler] = None,
) -> str:
    """Format lint results into a report string.

    Args:
        results: FileResult records, or raw dicts in the linter's JSON shape
        formatter: Registered formatter name
        color: Force color on/off; None detects from stdout. Ignored when
            ``styler`` is given.
        styler: Explicit color capability

    Returns:
        The formatted report
    """
    records = [
        r if isinstance(r, FileResult) else FileResult.from_dict(r, index=i)
        for i, r in enumerate(results)
    ]
    fmt = get_formatter(formatter, styler=styler or build_styler(color))
    logger.debug(f"Using {fmt.name} formatter with {fmt.styler!r}")
    return fmt.format(records)


def exit_code(results: Sequence[FileResult]) -> int:
    """Process exit status for a lint run: 1 if any file reports errors."""
    errors, _ = total_counts(results)
    return 1 if errors > 0 else 0


__all__ = ["build_styler", "exit_code", "format_results", "load_results"]
