"""Stylish formatter: per-file blocks of aligned rows plus a summary line.

Output for one file with one error::

    <blank>
    foo.scss
      5:10  error  Unexpected foo  foo
    <blank>
    ✖ 1 problem (1 error, 0 warnings)
"""

import logging
from typing import List, Sequence

from ..models import FileResult, Message, total_counts
from .base import BaseFormatter

logger = logging.getLogger(__name__)

INDENT = "  "
SEPARATOR = "  "
SUMMARY_MARKER = "✖"


def pluralize(word: str, count: int) -> str:
    """Return ``word`` for a count of exactly one, ``word + "s"`` otherwise."""
    return word if count == 1 else f"{word}s"


def summary_line(errors: int, warnings: int) -> str:
    total = errors + warnings
    return (
        f"{SUMMARY_MARKER} {total} {pluralize('problem', total)} "
        f"({errors} {pluralize('error', errors)}, "
        f"{warnings} {pluralize('warning', warnings)})"
    )


class StylishFormatter(BaseFormatter):
    """Human-readable report grouped by file.

    Within a file the position, label and message columns are padded to
    their widest cell so that the columns line up. Widths are measured on
    plain text and each file block is aligned on its own.
    """

    name = "stylish"

    def format(self, results: Sequence[FileResult]) -> str:
        results = list(results)
        if not any(r.messages for r in results):
            return ""

        output: List[str] = []
        rendered = 0
        for result in results:
            if not result.messages:
                continue
            rendered += 1
            output.append("\n")
            output.append(f"{self.styler.path(result.file_path)}\n")
            output.extend(f"{row}\n" for row in self._rows(result.messages))

        errors, warnings = total_counts(results)
        logger.debug(
            "Formatted %d file(s): %d error(s), %d warning(s)",
            rendered,
            errors,
            warnings,
        )

        # Exactly one emphasis call; errors win over warnings
        emphasize = self.styler.error if errors > 0 else self.styler.warning
        output.append(f"\n{emphasize(summary_line(errors, warnings))}\n")
        return "".join(output)

    def _rows(self, messages: Sequence[Message]) -> List[str]:
        cells = [
            (f"{m.line}:{m.column}", m.label, m.text, m.rule_id or "")
            for m in messages
        ]
        position_width = max(len(c[0]) for c in cells)
        label_width = max(len(c[1]) for c in cells)
        text_width = max(len(c[2]) for c in cells)

        rows = []
        for message, (position, label, text, rule) in zip(messages, cells):
            styled_label = (
                self.styler.error_label(label)
                if message.is_error
                else self.styler.warning_label(label)
            )
            row = SEPARATOR.join(
                [
                    _pad(self.styler.muted(position), position, position_width),
                    _pad(styled_label, label, label_width),
                    _pad(text, text, text_width),
                    self.styler.muted(rule),
                ]
            )
            rows.append(f"{INDENT}{row}".rstrip())
        return rows


def _pad(styled: str, plain: str, width: int) -> str:
    return styled + " " * (width - len(plain))
