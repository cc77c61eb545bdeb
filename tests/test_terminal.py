"""Tests for terminal capability detection."""

from __future__ import annotations

import io

import pytest
from rich.color import ColorSystem
from rich.console import Console

from fluent_requirements.terminal import DEFAULT_WIDTH, TerminalEncoding, detect_encoding, detect_width

# =============================================================================
# TerminalEncoding Unit Tests
# =============================================================================


class TestTerminalEncodingUnit:
    """Unit tests for TerminalEncoding."""

    @pytest.mark.parametrize(
        ("color_system", "expected"),
        [
            (None, TerminalEncoding.NO_COLORS),
            ("standard", TerminalEncoding.COLORS_16),
            ("windows", TerminalEncoding.COLORS_16),
            ("256", TerminalEncoding.COLORS_256),
            ("truecolor", TerminalEncoding.COLORS_16_MILLION),
        ],
    )
    def test_from_color_system(self, color_system: str | None, expected: TerminalEncoding) -> None:
        assert TerminalEncoding.from_color_system(color_system) is expected

    def test_color_system(self) -> None:
        assert TerminalEncoding.NO_COLORS.color_system is None
        assert TerminalEncoding.COLORS_16.color_system is ColorSystem.STANDARD
        assert TerminalEncoding.COLORS_256.color_system is ColorSystem.EIGHT_BIT
        assert TerminalEncoding.COLORS_16_MILLION.color_system is ColorSystem.TRUECOLOR


# =============================================================================
# Detection Unit Tests
# =============================================================================


class TestDetectionUnit:
    """Unit tests for detect_encoding() and detect_width()."""

    def test_forced_terminal_reports_its_colors_and_width(self) -> None:
        console = Console(file=io.StringIO(), force_terminal=True, color_system="256", width=120)

        assert detect_encoding(console) is TerminalEncoding.COLORS_256
        assert detect_width(console) == 120

    def test_non_terminal_has_no_colors_and_default_width(self) -> None:
        console = Console(file=io.StringIO(), force_terminal=False, width=120)

        assert detect_encoding(console) is TerminalEncoding.NO_COLORS
        assert detect_width(console) == DEFAULT_WIDTH
