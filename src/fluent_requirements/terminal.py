"""Terminal capability detection."""

from __future__ import annotations

import logging
from enum import Enum

from rich.color import ColorSystem
from rich.console import Console

__all__ = ["DEFAULT_WIDTH", "TerminalEncoding", "detect_encoding", "detect_width"]

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80


class TerminalEncoding(Enum):
    """The colours a terminal can display."""

    NO_COLORS = "none"
    COLORS_16 = "16"
    COLORS_256 = "256"
    COLORS_16_MILLION = "16m"

    @property
    def color_system(self) -> ColorSystem | None:
        """The rich colour system used to render ANSI styles, or None for plain text."""
        return _COLOR_SYSTEMS[self]

    @classmethod
    def from_color_system(cls, color_system: str | None) -> TerminalEncoding:
        """Map rich's ``Console.color_system`` name to an encoding."""
        if color_system is None:
            return cls.NO_COLORS
        if color_system == "truecolor":
            return cls.COLORS_16_MILLION
        if color_system == "256":
            return cls.COLORS_256
        return cls.COLORS_16


_COLOR_SYSTEMS: dict[TerminalEncoding, ColorSystem | None] = {
    TerminalEncoding.NO_COLORS: None,
    TerminalEncoding.COLORS_16: ColorSystem.STANDARD,
    TerminalEncoding.COLORS_256: ColorSystem.EIGHT_BIT,
    TerminalEncoding.COLORS_16_MILLION: ColorSystem.TRUECOLOR,
}


def detect_encoding(console: Console | None = None) -> TerminalEncoding:
    """Return the best encoding supported by the terminal attached to ``console``.

    Args:
        console: The console to inspect. Defaults to a console writing to stdout.
    """
    console = console or Console()
    encoding = TerminalEncoding.from_color_system(console.color_system)
    logger.debug("Detected terminal encoding %s (color_system=%s)", encoding, console.color_system)
    return encoding


def detect_width(console: Console | None = None) -> int:
    """Return the width of the terminal attached to ``console``, in characters."""
    console = console or Console()
    width = console.width if console.is_terminal else DEFAULT_WIDTH
    logger.debug("Detected terminal width %d", width)
    return width
