"""
lint-report - console reports for linter results

Turns per-file lint results into the "stylish" report: one block per file
with aligned position, severity and message columns, followed by a
colorized problem summary.
"""

__version__ = "0.1.0"

from .api import build_styler, exit_code, format_results
from .formatters import StylishFormatter, get_formatter
from .models import FileResult, Message, load_results
from .styling import PlainStyler, RichStyler, Styler

__all__ = [
    "format_results",  # Main entry point
    "exit_code",
    "build_styler",
    "get_formatter",
    "StylishFormatter",
    "FileResult",
    "Message",
    "load_results",
    "Styler",
    "RichStyler",
    "PlainStyler",
]
