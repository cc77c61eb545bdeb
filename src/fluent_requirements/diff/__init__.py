"""Line-aligned diffs of actual and expected values."""

from fluent_requirements.diff.context import ContextGenerator, ContextLine
from fluent_requirements.diff.generator import EOS_MARKER, DiffGenerator, DiffOperation, edit_script
from fluent_requirements.diff.result import DiffResult
from fluent_requirements.diff.writers import (
    DIFF_DELETE,
    DIFF_EQUAL,
    DIFF_INSERT,
    NEWLINE_MARKER,
    AbstractDiffWriter,
    ColorDiffWriter,
    TextDiffWriter,
)

__all__ = [
    "AbstractDiffWriter",
    "ColorDiffWriter",
    "ContextGenerator",
    "ContextLine",
    "DIFF_DELETE",
    "DIFF_EQUAL",
    "DIFF_INSERT",
    "DiffGenerator",
    "DiffOperation",
    "DiffResult",
    "EOS_MARKER",
    "NEWLINE_MARKER",
    "TextDiffWriter",
    "edit_script",
]
