"""The output of a diff."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

__all__ = ["DiffResult", "strip_ansi"]


def strip_ansi(line: str) -> str:
    """Remove ANSI escape sequences from ``line``."""
    if "\x1b" not in line:
        return line
    return Text.from_ansi(line).plain


@dataclass(frozen=True)
class DiffResult:
    """The lines of a rendered diff.

    Row ``i`` of every tuple describes the same line. ``diff_lines`` is empty
    when the diff was rendered with colours.

    Attributes:
        actual_lines: The actual value, padded so that it lines up with the expected value.
        diff_lines: Markers describing how each character of the actual value must change.
        expected_lines: The expected value, padded so that it lines up with the actual value.
        equal_lines: True for rows that required no insertions or deletions.
        padding_marker: The character used to pad lines.
    """

    actual_lines: tuple[str, ...]
    diff_lines: tuple[str, ...]
    expected_lines: tuple[str, ...]
    equal_lines: tuple[bool, ...]
    padding_marker: str

    def __post_init__(self) -> None:
        size = len(self.actual_lines)
        if len(self.expected_lines) != size or len(self.equal_lines) != size:
            raise ValueError(
                "Every row must have an actual line, an expected line and an equality flag.\n"
                f"actual_lines  : {size}\n"
                f"expected_lines: {len(self.expected_lines)}\n"
                f"equal_lines   : {len(self.equal_lines)}"
            )
        if self.diff_lines and len(self.diff_lines) != size:
            raise ValueError(
                f"diff_lines must be empty or contain {size} elements.\nactual: {len(self.diff_lines)}"
            )

    def __len__(self) -> int:
        return len(self.actual_lines)

    def is_padding(self, line: str) -> bool:
        """Check if ``line`` is empty or consists only of padding."""
        plain = strip_ansi(line)
        return plain.replace(self.padding_marker, "") == ""
