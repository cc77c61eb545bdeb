"""The blocks of text that make up a failure message."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from fluent_requirements.configuration import Configuration
    from fluent_requirements.diff.context import ContextLine

__all__ = ["ContextSection", "DiffSection", "MessageSection", "StringSection"]


class MessageSection(Protocol):
    """A block of lines, some of which may be ``key: value`` pairs."""

    def get_max_key_length(self) -> int:
        """The length of the longest key, or 0 if there are none."""
        ...

    def get_lines(self, key_width: int) -> list[str]:
        """Render the section, padding every key to ``key_width`` characters."""
        ...


class ContextSection:
    """``key: value`` pairs whose values are converted to strings when rendered."""

    def __init__(self, configuration: Configuration, entries: Mapping[str, Any]) -> None:
        self._configuration = configuration
        self._entries = dict(entries)

    def get_max_key_length(self) -> int:
        return max((len(key) for key in self._entries), default=0)

    def get_lines(self, key_width: int) -> list[str]:
        return [
            f"{key.ljust(key_width)}: {self._configuration.to_string(value)}"
            for key, value in self._entries.items()
        ]


class DiffSection:
    """Pre-rendered diff lines. Lines without a key are emitted as-is."""

    def __init__(self, lines: Sequence[ContextLine]) -> None:
        self._lines = tuple(lines)

    def get_max_key_length(self) -> int:
        return max((len(line.key) for line in self._lines), default=0)

    def get_lines(self, key_width: int) -> list[str]:
        result = []
        for line in self._lines:
            if line.key:
                result.append(f"{line.key.ljust(key_width)}: {line.value}")
            else:
                result.append(line.value)
        return result


class StringSection:
    """Free-form lines that do not take part in key alignment."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = list(lines)

    def get_max_key_length(self) -> int:
        return 0

    def get_lines(self, key_width: int) -> list[str]:
        return list(self._lines)
