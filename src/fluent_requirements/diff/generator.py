"""Character-level diff of two strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from difflib import SequenceMatcher
from enum import Enum

from fluent_requirements.diff.result import DiffResult
from fluent_requirements.diff.writers import NEWLINE_PATTERN, AbstractDiffWriter, ColorDiffWriter, TextDiffWriter
from fluent_requirements.terminal import TerminalEncoding

__all__ = ["DiffGenerator", "DiffOperation", "EOS_MARKER", "edit_script"]

logger = logging.getLogger(__name__)

EOS_MARKER = "\\0"
"""Appended to both values when either spans multiple lines."""


class DiffOperation(Enum):
    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass
class _Edit:
    deleted: str
    inserted: str

    def longest(self) -> int:
        return max(len(self.deleted), len(self.inserted))


def _common_overlap(first: str, second: str) -> int:
    """Return the length of the longest suffix of ``first`` that is a prefix of ``second``."""
    limit = min(len(first), len(second))
    for length in range(limit, 0, -1):
        if first.endswith(second[:length]):
            return length
    return 0


def _to_blocks(actual: str, expected: str) -> list[str | _Edit]:
    """Group the opcodes of ``SequenceMatcher`` into alternating equalities and edits."""
    blocks: list[str | _Edit] = []
    matcher = SequenceMatcher(None, actual, expected, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            if blocks and isinstance(blocks[-1], str):
                blocks[-1] += actual[i1:i2]
            else:
                blocks.append(actual[i1:i2])
            continue
        if blocks and isinstance(blocks[-1], _Edit):
            edit = blocks[-1]
        else:
            edit = _Edit("", "")
            blocks.append(edit)
        edit.deleted += actual[i1:i2]
        edit.inserted += expected[j1:j2]
    return blocks


def _eliminate_equalities(blocks: list[str | _Edit]) -> None:
    """Fold short equalities into the edits around them.

    An equality that is no longer than the edits on both of its sides
    fragments the diff without helping the reader, so it becomes part of a
    single larger edit.
    """
    changed = True
    while changed:
        changed = False
        for index in range(1, len(blocks) - 1):
            equality = blocks[index]
            before = blocks[index - 1]
            after = blocks[index + 1]
            if not (isinstance(equality, str) and isinstance(before, _Edit) and isinstance(after, _Edit)):
                continue
            if len(equality) <= before.longest() and len(equality) <= after.longest():
                merged = _Edit(
                    before.deleted + equality + after.deleted,
                    before.inserted + equality + after.inserted,
                )
                blocks[index - 1 : index + 2] = [merged]
                changed = True
                break


def _extract_overlaps(blocks: list[str | _Edit]) -> list[tuple[DiffOperation, str]]:
    """Convert blocks to an edit script, splitting out text shared by a deletion and its insertion.

    Example:
        deleting "foosball" and inserting "ballroom" becomes
        delete("foos"), equal("ball"), insert("room").
    """
    script: list[tuple[DiffOperation, str]] = []
    for block in blocks:
        if isinstance(block, str):
            script.append((DiffOperation.EQUAL, block))
            continue
        deleted, inserted = block.deleted, block.inserted
        if deleted and inserted:
            overlap_after = _common_overlap(deleted, inserted)
            overlap_before = _common_overlap(inserted, deleted)
            if overlap_after >= overlap_before:
                if overlap_after and (overlap_after * 2 >= len(deleted) or overlap_after * 2 >= len(inserted)):
                    script.append((DiffOperation.DELETE, deleted[:-overlap_after]))
                    script.append((DiffOperation.EQUAL, inserted[:overlap_after]))
                    script.append((DiffOperation.INSERT, inserted[overlap_after:]))
                    continue
            elif overlap_before * 2 >= len(deleted) or overlap_before * 2 >= len(inserted):
                script.append((DiffOperation.INSERT, inserted[:-overlap_before]))
                script.append((DiffOperation.EQUAL, deleted[:overlap_before]))
                script.append((DiffOperation.DELETE, deleted[overlap_before:]))
                continue
        script.append((DiffOperation.DELETE, deleted))
        script.append((DiffOperation.INSERT, inserted))
    return [(operation, text) for operation, text in script if text]


def edit_script(actual: str, expected: str) -> list[tuple[DiffOperation, str]]:
    """Compute the operations that turn ``actual`` into ``expected``.

    Deletions precede insertions within a single edit.

    Args:
        actual: The actual value.
        expected: The expected value.

    Returns:
        ``(operation, text)`` pairs. Concatenating the text of the EQUAL and
        DELETE pairs yields ``actual``; concatenating the EQUAL and INSERT
        pairs yields ``expected``.
    """
    blocks = _to_blocks(actual, expected)
    _eliminate_equalities(blocks)
    return _extract_overlaps(blocks)


class DiffGenerator:
    """Generates the diff of two strings.

    Example:
        result = DiffGenerator(TerminalEncoding.NO_COLORS).diff("foosball", "ballroom")
        result.diff_lines  # ("----    ++++",)
    """

    def __init__(self, encoding: TerminalEncoding = TerminalEncoding.NO_COLORS) -> None:
        """Initialize the generator.

        Args:
            encoding: The colours used to render the diff.
        """
        self._encoding = encoding

    def create_writer(self) -> AbstractDiffWriter:
        """Return a new writer for the configured encoding."""
        color_system = self._encoding.color_system
        if color_system is None:
            return TextDiffWriter()
        return ColorDiffWriter(color_system)

    def diff(self, actual: str, expected: str) -> DiffResult:
        """Generate the diff of two strings.

        Line breaks are rendered as a visible ``\\n`` marker. When either value
        spans multiple lines, ``EOS_MARKER`` is appended to both so that the
        end of each string is visible.

        Args:
            actual: The actual value.
            expected: The expected value.

        Returns:
            The rendered diff.
        """
        actual = actual.replace("\r\n", "\n")
        expected = expected.replace("\r\n", "\n")
        if NEWLINE_PATTERN.search(actual) or NEWLINE_PATTERN.search(expected):
            actual += EOS_MARKER
            expected += EOS_MARKER

        writer = self.create_writer()
        for operation, text in edit_script(actual, expected):
            if operation is DiffOperation.EQUAL:
                writer.write_equal(text)
            elif operation is DiffOperation.DELETE:
                writer.write_deleted(text)
            else:
                writer.write_inserted(text)
        result = writer.flush()
        logger.debug("Generated a %d-line diff", len(result))
        return result
