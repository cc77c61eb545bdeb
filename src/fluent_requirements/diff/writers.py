"""Writers that lay out an edit script as aligned actual and expected lines.

A writer receives runs of equal, deleted and inserted text and keeps two
cursors: the row being written for the actual value and the row being
written for the expected value. Deleted text only advances the actual
cursor on a line break, inserted text only the expected cursor. When the
cursors differ, equal text pads the opposite row so that both rows keep the
same width.
"""

from __future__ import annotations

import re
from abc import ABC
from typing import Callable

from rich.color import ColorSystem
from rich.style import Style

from fluent_requirements.diff.result import DiffResult
from fluent_requirements.errors import IllegalStateError

__all__ = [
    "AbstractDiffWriter",
    "ColorDiffWriter",
    "DIFF_DELETE",
    "DIFF_EQUAL",
    "DIFF_INSERT",
    "NEWLINE_MARKER",
    "TextDiffWriter",
]

NEWLINE_MARKER = "\\n"
NEWLINE_PATTERN = re.compile(r"\r?\n")

DIFF_EQUAL = " "
DIFF_DELETE = "-"
DIFF_INSERT = "+"


def split_lines(text: str, line_consumer: Callable[[str], None], newline_consumer: Callable[[], None]) -> None:
    """Split ``text`` on line breaks.

    Each line break is replaced by ``NEWLINE_MARKER``, passed to ``line_consumer``
    as part of the preceding line, followed by a call to ``newline_consumer``.
    Empty lines are not passed on.
    """
    lines = NEWLINE_PATTERN.split(text)
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if index < last:
            line += NEWLINE_MARKER
        if line:
            line_consumer(line)
        if index < last:
            newline_consumer()


class AbstractDiffWriter(ABC):
    """Base class for diff writers.

    Subclasses decorate the text of each run. Call ``flush()`` once all runs
    are written, then read the result.
    """

    def __init__(self, padding_marker: str) -> None:
        """Initialize the writer.

        Args:
            padding_marker: The character used to pad lines.
        """
        if len(padding_marker) != 1:
            raise ValueError(f"padding_marker must contain exactly 1 character.\nactual: {padding_marker!r}")
        self._padding_marker = padding_marker
        self._actual_rows: dict[int, str] = {}
        self._expected_rows: dict[int, str] = {}
        self._equal_rows: dict[int, bool] = {}
        self._actual_line_number = 0
        self._expected_line_number = 0
        self._result: DiffResult | None = None

    def get_padding_marker(self) -> str:
        return self._padding_marker

    # Decoration hooks

    def _decorate_equal(self, text: str) -> str:
        return text

    def _decorate_deleted(self, text: str) -> str:
        return text

    def _decorate_inserted(self, text: str) -> str:
        return text

    def _decorate_padding(self, length: int) -> str:
        return self._padding_marker * length

    # Hooks invoked after a line fragment is written

    def _after_equal(self, actual_row: int, expected_row: int, length: int) -> None:
        pass

    def _after_deleted(self, row: int, length: int) -> None:
        pass

    def _after_inserted(self, row: int, length: int) -> None:
        pass

    def _get_diff_lines(self, rows: list[int]) -> tuple[str, ...]:
        return ()

    @staticmethod
    def _append(rows: dict[int, str], row: int, text: str) -> None:
        rows[row] = rows.get(row, "") + text

    def _ensure_open(self) -> None:
        if self._result is not None:
            raise IllegalStateError("The writer has already been flushed.")

    def write_equal(self, text: str) -> None:
        """Write text that is present in both values."""
        self._ensure_open()
        split_lines(text, self._write_equal_line, self._write_equal_newline)

    def _write_equal_line(self, line: str) -> None:
        actual_row = self._actual_line_number
        expected_row = self._expected_line_number
        decorated = self._decorate_equal(line)
        self._append(self._actual_rows, actual_row, decorated)
        self._equal_rows.setdefault(actual_row, True)
        if actual_row != expected_row:
            padding = self._decorate_padding(len(line))
            self._append(self._expected_rows, actual_row, padding)
            self._append(self._actual_rows, expected_row, padding)
            self._equal_rows.setdefault(expected_row, True)
        self._append(self._expected_rows, expected_row, decorated)
        self._after_equal(actual_row, expected_row, len(line))

    def _write_equal_newline(self) -> None:
        self._actual_line_number += 1
        self._expected_line_number += 1

    def write_deleted(self, text: str) -> None:
        """Write text that is only present in the actual value."""
        self._ensure_open()
        split_lines(text, self._write_deleted_line, self._write_actual_newline)

    def _write_deleted_line(self, line: str) -> None:
        row = self._actual_line_number
        self._append(self._actual_rows, row, self._decorate_deleted(line))
        self._append(self._expected_rows, row, self._decorate_padding(len(line)))
        self._equal_rows[row] = False
        self._after_deleted(row, len(line))

    def _write_actual_newline(self) -> None:
        self._actual_line_number += 1

    def write_inserted(self, text: str) -> None:
        """Write text that is only present in the expected value."""
        self._ensure_open()
        split_lines(text, self._write_inserted_line, self._write_expected_newline)

    def _write_inserted_line(self, line: str) -> None:
        row = self._expected_line_number
        self._append(self._actual_rows, row, self._decorate_padding(len(line)))
        self._append(self._expected_rows, row, self._decorate_inserted(line))
        self._equal_rows[row] = False
        self._after_inserted(row, len(line))

    def _write_expected_newline(self) -> None:
        self._expected_line_number += 1

    def flush(self) -> DiffResult:
        """Finish writing. Subsequent calls return the same result.

        Returns:
            The rows written so far, ordered by row number. A writer that
            received no text produces a single empty row.
        """
        if self._result is not None:
            return self._result
        rows = sorted(set(self._actual_rows) | set(self._expected_rows))
        if not rows:
            rows = [0]
        self._result = DiffResult(
            actual_lines=tuple(self._actual_rows.get(row, "") for row in rows),
            diff_lines=self._get_diff_lines(rows),
            expected_lines=tuple(self._expected_rows.get(row, "") for row in rows),
            equal_lines=tuple(self._equal_rows.get(row, True) for row in rows),
            padding_marker=self._padding_marker,
        )
        return self._result

    def _get_result(self) -> DiffResult:
        if self._result is None:
            raise IllegalStateError("The writer must be flushed first.")
        return self._result

    def get_actual_lines(self) -> tuple[str, ...]:
        return self._get_result().actual_lines

    def get_diff_lines(self) -> tuple[str, ...]:
        return self._get_result().diff_lines

    def get_expected_lines(self) -> tuple[str, ...]:
        return self._get_result().expected_lines

    def get_equal_lines(self) -> tuple[bool, ...]:
        return self._get_result().equal_lines


class TextDiffWriter(AbstractDiffWriter):
    """Renders a diff as plain text, with a row of ``-``/``+`` markers between the two values.

    Example:
        writer = TextDiffWriter()
        writer.write_deleted("foos")
        writer.write_equal("ball")
        writer.write_inserted("room")
        result = writer.flush()
        result.actual_lines    # ("foosball    ",)
        result.diff_lines      # ("----    ++++",)
        result.expected_lines  # ("    ballroom",)
    """

    def __init__(self) -> None:
        super().__init__(padding_marker=" ")
        self._diff_rows: dict[int, str] = {}

    def _after_equal(self, actual_row: int, expected_row: int, length: int) -> None:
        self._append(self._diff_rows, expected_row, DIFF_EQUAL * length)
        if actual_row != expected_row:
            self._append(self._diff_rows, actual_row, DIFF_EQUAL * length)

    def _after_deleted(self, row: int, length: int) -> None:
        self._append(self._diff_rows, row, DIFF_DELETE * length)

    def _after_inserted(self, row: int, length: int) -> None:
        self._append(self._diff_rows, row, DIFF_INSERT * length)

    def _get_diff_lines(self, rows: list[int]) -> tuple[str, ...]:
        return tuple(self._diff_rows.get(row, "") for row in rows)


class ColorDiffWriter(AbstractDiffWriter):
    """Renders a diff using ANSI colours instead of a row of markers.

    Deleted text has a red background, inserted text a green background and
    padding is drawn as ``/`` on a black background. Equal text is reset to the
    terminal's default colours.
    """

    EQUAL_STYLE = Style(color="default", bgcolor="default")
    INSERT_STYLE = Style(color="bright_white", bgcolor="rgb(0,135,0)")
    DELETE_STYLE = Style(color="bright_white", bgcolor="rgb(175,0,0)")
    PADDING_STYLE = Style(bgcolor="black")

    def __init__(self, color_system: ColorSystem) -> None:
        """Initialize the writer.

        Args:
            color_system: The colours supported by the terminal.
        """
        super().__init__(padding_marker="/")
        self._color_system = color_system

    def _decorate_equal(self, text: str) -> str:
        return self.EQUAL_STYLE.render(text, color_system=self._color_system)

    def _decorate_deleted(self, text: str) -> str:
        return self.DELETE_STYLE.render(text, color_system=self._color_system)

    def _decorate_inserted(self, text: str) -> str:
        return self.INSERT_STYLE.render(text, color_system=self._color_system)

    def _decorate_padding(self, length: int) -> str:
        return self.PADDING_STYLE.render(super()._decorate_padding(length), color_system=self._color_system)
