"""Turns a pair of values into the diff lines shown in a failure message."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fluent_requirements.diff.generator import DiffGenerator
from fluent_requirements.diff.result import strip_ansi
from fluent_requirements.terminal import TerminalEncoding

if TYPE_CHECKING:
    from fluent_requirements.configuration import Configuration

__all__ = ["ContextGenerator", "ContextLine"]

_END_OF_LINE = re.compile(r"\\n|\\0$")


@dataclass(frozen=True)
class ContextLine:
    """A ``key: value`` line of a failure message.

    A line with an empty key is rendered as its value alone.
    """

    key: str
    value: str


_BLANK = ContextLine("", "")
_SKIPPED = ContextLine("", "[...]")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class ContextGenerator:
    """Decides whether two values warrant a diff, and renders it.

    Attributes:
        MIN_LENGTH_FOR_DIFF: Values whose string form is shorter than this, and
            that span a single line, are shown side by side instead of diffed.
    """

    MIN_LENGTH_FOR_DIFF = 10
    DIFF_KEY = "diff"

    def __init__(self, configuration: Configuration) -> None:
        self._configuration = configuration
        self._generator = DiffGenerator(configuration.terminal_encoding)

    def should_diff(self, actual_value: Any, expected_value: Any) -> bool:
        """Check if a diff of the two values would help the reader.

        Booleans are never diffed. Otherwise a diff is shown if the
        configuration allows it and either value renders as a string of at
        least ``MIN_LENGTH_FOR_DIFF`` characters or spans multiple lines.
        """
        if not self._configuration.allow_diff:
            return False
        if isinstance(actual_value, bool) or isinstance(expected_value, bool):
            return False
        for value in (actual_value, expected_value):
            text = self._configuration.to_string(value)
            if len(text) >= self.MIN_LENGTH_FOR_DIFF or "\n" in text:
                return True
        return False

    def get_diff(
        self,
        actual_name: str,
        actual_value: Any,
        expected_name: str,
        expected_value: Any,
    ) -> list[ContextLine]:
        """Render the diff of two values.

        Sequences are compared element by element and identified by their
        index (``actual[3]``). Multi-line strings are identified by their line
        number (``actual@3``). Runs of rows that read the same in both values are
        replaced by ``[...]``, except for the first and last row.
        """
        if _is_sequence(actual_value) and _is_sequence(expected_value):
            return self._diff_sequences(actual_name, actual_value, expected_name, expected_value)
        return self._diff_strings(
            actual_name,
            self._configuration.to_string(actual_value),
            expected_name,
            self._configuration.to_string(expected_value),
        )

    def get_legend(self) -> list[str]:
        """Return the lines that explain the notation used by diffs."""
        if self._configuration.terminal_encoding is TerminalEncoding.NO_COLORS:
            insert_key, delete_key = "+", "-"
        else:
            insert_key, delete_key = "green", "red"
        entries = [
            (insert_key, "Add this character"),
            (delete_key, "Delete this character"),
            ("[index]", "Refers to the index of a collection element"),
            ("@line", "Refers to the line number of a string"),
        ]
        width = max(len(key) for key, _ in entries)
        lines = ["Legend", "------"]
        lines.extend(f"{key.ljust(width)}: {meaning}" for key, meaning in entries)
        return lines

    def _diff_strings(self, actual_name: str, actual: str, expected_name: str, expected: str) -> list[ContextLine]:
        result = self._generator.diff(actual, expected)
        diff_lines = result.diff_lines
        lines: list[ContextLine] = []
        if len(result) == 1:
            lines.append(_BLANK)
            lines.append(ContextLine(actual_name, result.actual_lines[0]))
            if diff_lines and not result.equal_lines[0]:
                lines.append(ContextLine(self.DIFF_KEY, diff_lines[0]))
            lines.append(ContextLine(expected_name, result.expected_lines[0]))
            return lines

        actual_line_number = 0
        expected_line_number = 0
        skipped = False
        last = len(result) - 1
        for index in range(len(result)):
            actual_line = result.actual_lines[index]
            expected_line = result.expected_lines[index]
            equal = result.equal_lines[index]
            # Equal text may land on different rows of each value after a line is added or removed
            identical = equal and strip_ansi(actual_line) == strip_ansi(expected_line)
            if identical and index != 0 and index != last:
                skipped = True
                actual_line_number += 1
                expected_line_number += 1
                continue
            if skipped:
                skipped = False
                lines.extend((_BLANK, _SKIPPED))

            lines.append(_BLANK)
            if result.is_padding(actual_line):
                lines.append(ContextLine(actual_name, actual_line))
            else:
                lines.append(ContextLine(f"{actual_name}@{actual_line_number}", actual_line))
                if _END_OF_LINE.search(strip_ansi(actual_line)):
                    actual_line_number += 1
            if diff_lines and not equal:
                lines.append(ContextLine(self.DIFF_KEY, diff_lines[index]))
            if result.is_padding(expected_line):
                lines.append(ContextLine(expected_name, expected_line))
            else:
                lines.append(ContextLine(f"{expected_name}@{expected_line_number}", expected_line))
                if _END_OF_LINE.search(strip_ansi(expected_line)):
                    expected_line_number += 1
        return lines

    def _diff_sequences(
        self,
        actual_name: str,
        actual: Sequence[Any],
        expected_name: str,
        expected: Sequence[Any],
    ) -> list[ContextLine]:
        lines: list[ContextLine] = []
        size = max(len(actual), len(expected))
        skipped = False
        for index in range(size):
            equal = True
            if index < len(actual):
                actual_string = self._configuration.to_string(actual[index])
                actual_key = f"{actual_name}[{index}]"
            else:
                actual_string = ""
                actual_key = actual_name
                equal = False
            if index < len(expected):
                expected_string = self._configuration.to_string(expected[index])
                expected_key = f"{expected_name}[{index}]"
            else:
                expected_string = ""
                expected_key = expected_name
                equal = False
            if equal:
                equal = actual[index] == expected[index]
            if equal and index != 0 and index != size - 1:
                skipped = True
                continue
            if skipped:
                skipped = False
                lines.extend((_BLANK, _SKIPPED))
            lines.extend(self._diff_strings(actual_key, actual_string, expected_key, expected_string))
        return lines
