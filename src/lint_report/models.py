"""Data models for lint results"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .exceptions import MalformedResultError, UnsupportedSeverityError

# Numeric severities as emitted by the linter
SEVERITY_WARNING = 1
SEVERITY_ERROR = 2

SEVERITY_LABELS: Dict[int, str] = {
    SEVERITY_WARNING: "warning",
    SEVERITY_ERROR: "error",
}


@dataclass(frozen=True)
class Message:
    """A single diagnostic at a source position.

    Fatal messages (the file could not be read or parsed at all) carry no
    position or rule; they are always reported as errors.
    """

    message: str
    severity: int = SEVERITY_ERROR
    line: int = 0
    column: int = 0
    rule_id: Optional[str] = None
    fatal: bool = False

    @property
    def is_error(self) -> bool:
        return self.fatal or self.severity == SEVERITY_ERROR

    @property
    def label(self) -> str:
        """Display label for this message's severity.

        Raises:
            UnsupportedSeverityError: If severity is neither 1 nor 2
        """
        if self.fatal:
            return SEVERITY_LABELS[SEVERITY_ERROR]
        try:
            return SEVERITY_LABELS[self.severity]
        except KeyError:
            raise UnsupportedSeverityError(self.severity) from None

    @property
    def text(self) -> str:
        """Message text with a single trailing period removed."""
        if self.message.endswith("."):
            return self.message[:-1]
        return self.message

    @classmethod
    def from_dict(
        cls,
        d: Mapping[str, Any],
        index: Optional[int] = None,
        message_index: Optional[int] = None,
    ) -> "Message":
        # Errors name both the file result and the message position
        where = (index, message_index)
        if not isinstance(d, Mapping):
            raise MalformedResultError("messages", "expected an object", *where)

        fatal = _optional(d, "fatal", bool, False, *where)
        text = _required(d, "message", str, *where)

        if fatal:
            return cls(
                message=text,
                severity=_optional(d, "severity", int, SEVERITY_ERROR, *where),
                line=_optional(d, "line", int, 0, *where),
                column=_optional(d, "column", int, 0, *where),
                rule_id=_optional(d, "ruleId", str, None, *where),
                fatal=True,
            )

        severity = _required(d, "severity", int, *where)
        if severity not in SEVERITY_LABELS:
            raise UnsupportedSeverityError(severity, *where)

        return cls(
            message=text,
            severity=severity,
            line=_required(d, "line", int, *where),
            column=_required(d, "column", int, *where),
            rule_id=_optional(d, "ruleId", str, None, *where),
        )


@dataclass(frozen=True)
class FileResult:
    """Lint results for one file.

    ``error_count`` and ``warning_count`` are taken from the producer as-is
    and are not recomputed from ``messages``.
    """

    file_path: str
    messages: Tuple[Message, ...] = field(default_factory=tuple)
    error_count: int = 0
    warning_count: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable one
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    @property
    def problem_count(self) -> int:
        return self.error_count + self.warning_count

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], index: Optional[int] = None) -> "FileResult":
        if not isinstance(d, Mapping):
            raise MalformedResultError("result", "expected an object", index)

        raw_messages = d.get("messages", [])
        if not isinstance(raw_messages, list):
            raise MalformedResultError("messages", "expected a list", index)

        error_count = _optional(d, "errorCount", int, 0, index)
        warning_count = _optional(d, "warningCount", int, 0, index)
        if error_count < 0:
            raise MalformedResultError("errorCount", "must be non-negative", index)
        if warning_count < 0:
            raise MalformedResultError("warningCount", "must be non-negative", index)

        return cls(
            file_path=_required(d, "filePath", str, index),
            messages=tuple(
                Message.from_dict(m, index, message_index=i) for i, m in enumerate(raw_messages)
            ),
            error_count=error_count,
            warning_count=warning_count,
        )


def load_results(data: Any) -> List[FileResult]:
    """Build FileResult records from decoded JSON.

    Args:
        data: A list of result objects in the linter's camelCase shape

    Returns:
        FileResult list in input order

    Raises:
        MalformedResultError: If the payload or any record is malformed
    """
    if not isinstance(data, list):
        raise MalformedResultError("results", "expected a list of file results")
    return [FileResult.from_dict(item, index=i) for i, item in enumerate(data)]


def total_counts(results: Sequence[FileResult]) -> Tuple[int, int]:
    """Return (errors, warnings) summed over all results."""
    errors = sum(r.error_count for r in results)
    warnings = sum(r.warning_count for r in results)
    return errors, warnings


# bool is a subclass of int; never accept it where a number is expected
def _check_type(value: Any, expected: type) -> bool:
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def _required(
    d: Mapping[str, Any],
    key: str,
    expected: type,
    index: Optional[int],
    message_index: Optional[int] = None,
) -> Any:
    if key not in d:
        raise MalformedResultError(key, "missing required field", index, message_index)
    value = d[key]
    if not _check_type(value, expected):
        raise MalformedResultError(key, f"expected {expected.__name__}", index, message_index)
    return value


def _optional(
    d: Mapping[str, Any],
    key: str,
    expected: type,
    default: Any,
    index: Optional[int],
    message_index: Optional[int] = None,
) -> Any:
    value = d.get(key)
    if value is None:
        return default
    if not _check_type(value, expected):
        raise MalformedResultError(key, f"expected {expected.__name__}", index, message_index)
    return value
