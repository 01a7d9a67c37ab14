"""Terminal styling for report output.

Formatters never emit escape codes themselves; they hand plain text to a
``Styler``. Whether color is on is decided once, when the styler is
built, and is never read from global state.

Example:
    >>> styler = RichStyler(enabled=False)
    >>> styler.error("1 problem")
    '1 problem'
"""

from abc import ABC, abstractmethod
from typing import IO, Optional

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style


class Styler(ABC):
    """Color capability consumed by formatters.

    ``error`` and ``warning`` emphasize a whole summary line. The remaining
    hooks decorate individual report cells and default to returning the
    text unchanged.
    """

    @abstractmethod
    def error(self, text: str) -> str:
        """Emphasize text as an error (summary line)."""

    @abstractmethod
    def warning(self, text: str) -> str:
        """Emphasize text as a warning (summary line)."""

    def error_label(self, text: str) -> str:
        return text

    def warning_label(self, text: str) -> str:
        return text

    def path(self, text: str) -> str:
        return text

    def muted(self, text: str) -> str:
        return text


class PlainStyler(Styler):
    """Styler that never adds color."""

    def error(self, text: str) -> str:
        return text

    def warning(self, text: str) -> str:
        return text


class RichStyler(Styler):
    """ANSI styling rendered through rich.

    Args:
        enabled: Emit escape codes. When False every hook returns its input.
        color_system: rich color system used for rendering
    """

    ERROR = Style(color="red", bold=True)
    WARNING = Style(color="yellow", bold=True)
    ERROR_LABEL = Style(color="red")
    WARNING_LABEL = Style(color="yellow")
    PATH = Style(underline=True)
    MUTED = Style(dim=True)

    def __init__(self, enabled: bool = True, color_system: ColorSystem = ColorSystem.STANDARD):
        self.enabled = enabled
        self.color_system = color_system

    @classmethod
    def detect(cls, file: Optional[IO[str]] = None) -> "RichStyler":
        """Build a styler matching the color support of ``file`` (stdout by default).

        rich honours NO_COLOR, FORCE_COLOR and TERM when probing the stream.
        """
        console = Console(file=file)
        enabled = console.color_system is not None and not console.no_color
        return cls(enabled=enabled)

    def _render(self, style: Style, text: str) -> str:
        if not self.enabled or not text:
            return text
        return style.render(text, color_system=self.color_system)

    def error(self, text: str) -> str:
        return self._render(self.ERROR, text)

    def warning(self, text: str) -> str:
        return self._render(self.WARNING, text)

    def error_label(self, text: str) -> str:
        return self._render(self.ERROR_LABEL, text)

    def warning_label(self, text: str) -> str:
        return self._render(self.WARNING_LABEL, text)

    def path(self, text: str) -> str:
        return self._render(self.PATH, text)

    def muted(self, text: str) -> str:
        return self._render(self.MUTED, text)

    def __repr__(self) -> str:
        return f"RichStyler(enabled={self.enabled!r})"
