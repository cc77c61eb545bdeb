"""Process-wide settings shared by every validator factory."""

from __future__ import annotations

import logging
from typing import Final

from fluent_requirements.terminal import TerminalEncoding, detect_encoding, detect_width

__all__ = ["GlobalConfiguration", "get_global_configuration"]

logger = logging.getLogger(__name__)


class GlobalConfiguration:
    """Settings that apply to every validator factory in the process.

    Factories read ``diff_enabled`` and the terminal settings when they are
    created. ``assertions_enabled`` is read on every ``assert_that()`` call.
    The terminal encoding and width are detected on first access and cached.
    """

    def __init__(self) -> None:
        self._assertions_enabled = False
        self._diff_enabled = True
        self._terminal_encoding: TerminalEncoding | None = None
        self._terminal_width: int | None = None

    @property
    def assertions_enabled(self) -> bool:
        """Whether ``assert_that()`` runs its validations. Defaults to False."""
        return self._assertions_enabled

    @assertions_enabled.setter
    def assertions_enabled(self, enabled: bool) -> None:
        logger.debug("assertions_enabled=%s", enabled)
        self._assertions_enabled = enabled

    @property
    def diff_enabled(self) -> bool:
        """Whether failure messages may include a diff. Defaults to True."""
        return self._diff_enabled

    @diff_enabled.setter
    def diff_enabled(self, enabled: bool) -> None:
        logger.debug("diff_enabled=%s", enabled)
        self._diff_enabled = enabled

    @property
    def terminal_encoding(self) -> TerminalEncoding:
        """The colours used when rendering diffs."""
        if self._terminal_encoding is None:
            self.use_best_terminal_encoding()
        assert self._terminal_encoding is not None
        return self._terminal_encoding

    @terminal_encoding.setter
    def terminal_encoding(self, encoding: TerminalEncoding) -> None:
        if not isinstance(encoding, TerminalEncoding):
            raise TypeError(f"encoding must be a TerminalEncoding.\nactual: {encoding!r}")
        logger.debug("terminal_encoding=%s", encoding)
        self._terminal_encoding = encoding

    @property
    def terminal_width(self) -> int:
        """The width of the terminal, in characters."""
        if self._terminal_width is None:
            self.use_best_terminal_width()
        assert self._terminal_width is not None
        return self._terminal_width

    @terminal_width.setter
    def terminal_width(self, width: int) -> None:
        if width <= 0:
            raise ValueError(f"width must be positive.\nactual: {width}")
        logger.debug("terminal_width=%d", width)
        self._terminal_width = width

    def use_best_terminal_encoding(self) -> GlobalConfiguration:
        """Detect the terminal's encoding, replacing any earlier value.

        Returns:
            Self for method chaining.
        """
        self._terminal_encoding = detect_encoding()
        return self

    def use_best_terminal_width(self) -> GlobalConfiguration:
        """Detect the terminal's width, replacing any earlier value.

        Returns:
            Self for method chaining.
        """
        self._terminal_width = detect_width()
        return self


_GLOBAL_CONFIGURATION: Final[GlobalConfiguration] = GlobalConfiguration()


def get_global_configuration() -> GlobalConfiguration:
    """Return the process-wide configuration."""
    return _GLOBAL_CONFIGURATION
