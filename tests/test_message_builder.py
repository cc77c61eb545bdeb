"""Tests for MessageBuilder and the layout of failure messages."""

from __future__ import annotations

import pytest

from fluent_requirements.configuration import Configuration
from fluent_requirements.diff import EOS_MARKER, NEWLINE_MARKER, ContextLine
from fluent_requirements.factory import Validators
from fluent_requirements.message import ContextSection, DiffSection, MessageBuilder, StringSection, quote_name

from .conftest import new_validators

# =============================================================================
# quote_name Unit Tests
# =============================================================================


class TestQuoteNameUnit:
    """Unit tests for quote_name()."""

    def test_simple_name_is_quoted(self) -> None:
        assert quote_name("actual") == '"actual"'

    def test_method_chain_is_left_bare(self) -> None:
        assert quote_name("actual.length()") == "actual.length()"

    def test_static_method(self) -> None:
        assert MessageBuilder.quote_name("value") == '"value"'


# =============================================================================
# MessageBuilder Unit Tests
# =============================================================================


class TestMessageBuilderUnit:
    """Unit tests for MessageBuilder."""

    def test_message_must_end_with_period(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")

        with pytest.raises(ValueError):
            MessageBuilder(validator, "no period")

    def test_period_is_dropped_without_sections(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")

        assert MessageBuilder(validator, '"actual" must be odd.').to_string() == '"actual" must be odd'

    def test_period_is_kept_when_message_contains_comma(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")

        message = MessageBuilder(validator, '"actual" must be 1, 2 or 3.').to_string()

        assert message == '"actual" must be 1, 2 or 3.'

    def test_context_keys_are_aligned(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")

        message = (
            MessageBuilder(validator, '"actual" must be even.')
            .with_context(5, "actual")
            .with_context("req-1", "request")
            .to_string()
        )

        assert message == '"actual" must be even.\nactual : 5\nrequest: "req-1"'

    def test_failure_context_overrides_validator_context(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual").with_context("old", "label").with_context(1, "attempt")

        message = MessageBuilder(validator, '"actual" must be even.').with_context("new", "label").to_string()

        assert message == '"actual" must be even.\nlabel  : "new"\nattempt: 1'

    def test_str_renders_message(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")
        builder = MessageBuilder(validator, '"actual" must be even.').with_context(5, "actual")

        assert str(builder) == builder.to_string()

    def test_add_diff_of_short_values_adds_context(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")

        message = MessageBuilder(validator, '"actual" must be 6.').add_diff("actual", 5, "expected", 6).to_string()

        assert message == '"actual" must be 6.\nactual  : 5\nexpected: 6'

    def test_add_diff_skips_expected_already_in_message(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")

        message = (
            MessageBuilder(validator, '"actual" must be 6.')
            .add_diff("actual", 5, "expected", 6, expected_in_message=True)
            .to_string()
        )

        assert message == '"actual" must be 6.\nactual: 5'


# =============================================================================
# Section Unit Tests
# =============================================================================


class TestSectionsUnit:
    """Unit tests for message sections."""

    def test_context_section(self) -> None:
        section = ContextSection(Configuration(), {"a": 1, "long": "x"})

        assert section.get_max_key_length() == 4
        assert section.get_lines(6) == ["a     : 1", 'long  : "x"']

    def test_diff_section_emits_unkeyed_lines_as_is(self) -> None:
        section = DiffSection([ContextLine("", ""), ContextLine("actual", "x")])

        assert section.get_max_key_length() == 6
        assert section.get_lines(8) == ["", "actual  : x"]

    def test_string_section_does_not_align(self) -> None:
        section = StringSection(["Legend"])

        assert section.get_max_key_length() == 0
        assert section.get_lines(10) == ["Legend"]


# =============================================================================
# Failure Message Layout Tests
# =============================================================================


class TestMessageLayout:
    """End-to-end layout of messages that contain diffs."""

    def _message(self, actual: object, expected: object, width: int = 80) -> str:
        validators = new_validators(width=width)
        with pytest.raises(ValueError) as excinfo:
            validators.require_that(actual, "actual").is_equal_to(expected)
        return str(excinfo.value)

    def test_short_values_are_shown_side_by_side(self) -> None:
        assert self._message(5, 6) == '"actual" must be equal to 6.\nactual: 5'

    def test_single_line_diff(self) -> None:
        message = self._message("array[16]", "array[15]")

        expected = (
            '"actual" must be equal to "array[15]".\n'
            "\n"
            'actual  : "array[16 ]"\n'
            "diff    : " + " " * len('"array[1') + "-+" + " " * len(']"') + "\n"
            'expected: "array[1 5]"\n'
            "\n"
            "Legend\n"
            "------\n"
        )
        assert message.startswith(expected)

    def test_skips_identical_lines(self) -> None:
        message = self._message("1\n2\n3\n4\n5", "1\n2\n9\n4\n5")

        expected = (
            '"actual" had an unexpected value.\n'
            "\n"
            'actual@0  : "1' + NEWLINE_MARKER + "\n"
            'expected@0: "1' + NEWLINE_MARKER + "\n"
            "\n"
            "[...]\n"
            "\n"
            "actual@2  : 3 " + NEWLINE_MARKER + "\n"
            "diff      : -+  \n"
            "expected@2:  9" + NEWLINE_MARKER + "\n"
            "\n"
            "[...]\n"
            "\n"
            'actual@4  : 5"' + EOS_MARKER + "\n"
            'expected@4: 5"' + EOS_MARKER + "\n"
            "\n"
            "Legend\n"
        )
        assert message.startswith(expected)

    def test_list_elements_are_diffed_by_index(self) -> None:
        message = self._message([1, 2, 3, 4, 5], [1, 2, 9, 4, 5])

        expected = (
            '"actual" must be equal to [1, 2, 9, 4, 5].\n'
            "\n"
            "actual[0]  : 1\n"
            "expected[0]: 1\n"
            "\n"
            "[...]\n"
            "\n"
            "actual[2]  : 3 \n"
            "diff       : -+\n"
            "expected[2]:  9\n"
            "\n"
            "[...]\n"
            "\n"
            "actual[4]  : 5\n"
            "expected[4]: 5\n"
        )
        assert message.startswith(expected)

    def test_expected_shorter_than_terminal_width_is_spelled_out(self) -> None:
        width = len('"actual" must be equal to "expected".') + 1

        assert 'must be equal to "expected"' in self._message("actual", "expected", width)

    def test_expected_as_wide_as_terminal_is_not_spelled_out(self) -> None:
        width = len('"actual" must be equal to "expected".')

        message = self._message("actual", "expected", width)

        assert 'must be equal to "expected"' not in message
        assert message.startswith('"actual" had an unexpected value.')

    def test_multi_line_expected_is_not_spelled_out(self) -> None:
        message = self._message("a\nb", "a\nc")

        assert message.startswith('"actual" had an unexpected value.')

    def test_named_expected_value(self) -> None:
        validators = new_validators()

        with pytest.raises(ValueError) as excinfo:
            validators.require_that(5, "actual").is_equal_to(6, "limit")

        assert str(excinfo.value) == '"actual" must be equal to "limit".\nactual: 5\nlimit : 6'
