"""Base formatter interface for lint report rendering."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..models import FileResult
from ..styling import PlainStyler, Styler


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    Args:
        styler: Color capability; defaults to no color
    """

    name: str = ""

    def __init__(self, styler: Optional[Styler] = None):
        self.styler = styler if styler is not None else PlainStyler()

    def render(self, results: Sequence[FileResult]) -> None:
        """Write the formatted report to stdout."""
        print(self.format(results), end="")

    @abstractmethod
    def format(self, results: Sequence[FileResult]) -> str:
        """Return formatted string representation of results."""
