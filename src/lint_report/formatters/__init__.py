"""Output formatters for lint results."""

from typing import Dict, Optional, Type

from ..exceptions import UnknownFormatterError
from ..styling import Styler
from .base import BaseFormatter
from .stylish import StylishFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    StylishFormatter.name: StylishFormatter,
}


def get_formatter(name: str, styler: Optional[Styler] = None) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: Registered formatter name ("stylish")
        styler: Color capability passed to the formatter

    Returns:
        Formatter instance

    Raises:
        UnknownFormatterError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise UnknownFormatterError(name, list(FORMATTERS))
    return cls(styler=styler)


__all__ = [
    "BaseFormatter",
    "StylishFormatter",
    "FORMATTERS",
    "get_formatter",
]
