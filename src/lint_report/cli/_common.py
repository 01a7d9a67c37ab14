"""Shared CLI helpers."""

import sys
from pathlib import Path
from typing import List

from rich.console import Console

from ..loader import read_results
from ..models import FileResult

# Reports go to stdout; diagnostics about the tool itself go here
err_console = Console(stderr=True)

STDIN = "-"


def read_input(results_file: str) -> List[FileResult]:
    """Read results from a path, or from stdin for ``-``."""
    if results_file == STDIN:
        return read_results(sys.stdin)
    return read_results(Path(results_file))
