"""Shared test fixtures for lint-report tests."""

import logging
from collections import defaultdict

import pytest

from lint_report.models import FileResult, Message
from lint_report.styling import RichStyler, Styler


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() so loggers propagate to caplog again."""
    yield
    logger = logging.getLogger("lint_report")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class SpyStyler(Styler):
    """Delegates to a real styler and records every call by hook name."""

    def __init__(self, inner: Styler):
        self.inner = inner
        self.calls = defaultdict(list)

    def call_count(self, hook: str) -> int:
        return len(self.calls[hook])

    def _record(self, hook: str, text: str) -> str:
        self.calls[hook].append(text)
        return getattr(self.inner, hook)(text)

    def error(self, text):
        return self._record("error", text)

    def warning(self, text):
        return self._record("warning", text)

    def error_label(self, text):
        return self._record("error_label", text)

    def warning_label(self, text):
        return self._record("warning_label", text)

    def path(self, text):
        return self._record("path", text)

    def muted(self, text):
        return self._record("muted", text)


@pytest.fixture
def styler():
    """Spy over a color-disabled rich styler."""
    return SpyStyler(RichStyler(enabled=False))


@pytest.fixture
def color_styler():
    """Spy over a color-enabled rich styler."""
    return SpyStyler(RichStyler(enabled=True))


@pytest.fixture
def foo_error():
    return Message(message="Unexpected foo.", severity=2, line=5, column=10, rule_id="foo")


@pytest.fixture
def foo_warning():
    return Message(message="Unexpected foo.", severity=1, line=5, column=10, rule_id="foo")


@pytest.fixture
def bar_warning():
    return Message(message="Unexpected bar.", severity=1, line=6, column=11, rule_id="bar")


@pytest.fixture
def two_files(foo_error, bar_warning):
    """foo.scss with one error, bar.scss with one warning."""
    return [
        FileResult("foo.scss", [foo_error], error_count=1, warning_count=0),
        FileResult("bar.scss", [bar_warning], error_count=0, warning_count=1),
    ]


@pytest.fixture
def raw_results():
    """Results in the linter's JSON shape."""
    return [
        {
            "filePath": "foo.scss",
            "errorCount": 1,
            "warningCount": 1,
            "messages": [
                {
                    "message": "Unexpected foo.",
                    "severity": 2,
                    "line": 5,
                    "column": 10,
                    "ruleId": "foo",
                },
                {
                    "message": "Unexpected bar.",
                    "severity": 1,
                    "line": 6,
                    "column": 11,
                    "ruleId": "bar",
                },
            ],
        }
    ]
