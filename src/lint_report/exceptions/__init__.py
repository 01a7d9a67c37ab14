"""Exception hierarchy for lint-report."""

from .base import LintReportError
from .config import ConfigurationError, InvalidConfigError
from .input import (
    InputError,
    MalformedResultError,
    UnknownFormatterError,
    UnsupportedSeverityError,
)

__all__ = [
    "LintReportError",
    "InputError",
    "MalformedResultError",
    "UnsupportedSeverityError",
    "UnknownFormatterError",
    "ConfigurationError",
    "InvalidConfigError",
]
