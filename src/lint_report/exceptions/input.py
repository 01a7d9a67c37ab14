"""Input exceptions: malformed result records, unsupported severities."""

from typing import Any, Dict, List, Optional

from .base import LintReportError


class InputError(LintReportError):
    """Base class for errors in the lint results handed to a formatter."""
    pass


class MalformedResultError(InputError):
    """Raised when a result record is missing a field or has the wrong type.

    ``index`` is the position of the file result, ``message_index`` the
    position of the message within it.
    """

    def __init__(
        self,
        field: str,
        reason: str,
        index: Optional[int] = None,
        message_index: Optional[int] = None,
    ):
        details: Dict[str, str] = {"field": field, "reason": reason}
        if index is not None:
            details["index"] = str(index)
        if message_index is not None:
            details["message_index"] = str(message_index)

        super().__init__(f"Malformed lint result: {field}", details=details)
        self.field = field
        self.reason = reason
        self.index = index
        self.message_index = message_index


class UnsupportedSeverityError(InputError):
    """Raised for a message severity other than 1 (warning) or 2 (error)."""

    def __init__(
        self,
        severity: Any,
        index: Optional[int] = None,
        message_index: Optional[int] = None,
    ):
        details: Dict[str, str] = {"supported": "1, 2"}
        if index is not None:
            details["index"] = str(index)
        if message_index is not None:
            details["message_index"] = str(message_index)

        super().__init__(f"Unsupported severity: {severity!r}", details=details)
        self.severity = severity
        self.index = index
        self.message_index = message_index


class UnknownFormatterError(LintReportError):
    """Raised when asking the registry for a formatter it does not have."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(
            f"Unknown formatter: {name!r}",
            details={"available": ", ".join(sorted(available))},
        )
        self.name = name
        self.available = available
