"""Validator for numbers."""

from __future__ import annotations

import math
import operator
from enum import Enum
from typing import Any, Callable

from fluent_requirements.message import number_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.validators.base import AbstractValidator, require_valid_name

__all__ = ["Comparison", "NumberValidator"]


class Comparison(Enum):
    """A comparison against a limit.

    Each member holds the operator and how a failure is phrased for a
    number and for the size of a collection.
    """

    GREATER_THAN = (operator.gt, "must be greater than", "must contain more than")
    GREATER_THAN_OR_EQUAL_TO = (operator.ge, "must be greater than or equal to", "must contain at least")
    LESS_THAN = (operator.lt, "must be less than", "must contain fewer than")
    LESS_THAN_OR_EQUAL_TO = (operator.le, "must be less than or equal to", "must contain at most")

    def __init__(self, test: Callable[[Any, Any], bool], number_phrase: str, size_phrase: str) -> None:
        self.test = test
        self.number_phrase = number_phrase
        self.size_phrase = size_phrase


def _require_valid_range(start: Any, end: Any) -> None:
    if end < start:
        raise ValueError(
            f"end must be greater than or equal to start.\nstart: {start}\nend  : {end}"
        )


def _is_whole_number(value: Any) -> bool:
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value == math.floor(value)


def _is_multiple_of(value: Any, factor: Any) -> bool:
    if factor == 0:
        return value == 0
    return value % factor == 0


class NumberValidator(AbstractValidator[Any]):
    """Validates an ``int``, ``float`` or other real number.

    Example:
        require_that(port, "port").is_between(1, 65536)
        require_that(ratio, "ratio").is_finite().is_between_closed(0.0, 1.0)
    """

    # Message hooks, replaced by SizeValidator

    def _comparison_message(self, comparison: Comparison, limit_name: str | None, limit: Any) -> MessageBuilder:
        return number_messages.number_comparison(self, comparison.number_phrase, limit_name, limit)

    def _between_message(self, start: Any, end: Any, end_inclusive: bool) -> MessageBuilder:
        return number_messages.number_is_between(self, start, True, end, end_inclusive)

    def _check(self, predicate: Callable[[Any], bool], message: Callable[[], MessageBuilder]) -> None:
        if self._value.none_to_invalid().validation_failed(predicate):
            self._fail_on_none()
            self._add_value_error(message())

    def _compare(self, comparison: Comparison, limit: Any, name: str | None) -> NumberValidator:
        if name is not None:
            require_valid_name(name)
        self._check(
            lambda value: comparison.test(value, limit),
            lambda: self._comparison_message(comparison, name, limit),
        )
        return self

    def is_negative(self) -> NumberValidator:
        self._check(lambda value: value < 0, lambda: number_messages.number_is_negative(self))
        return self

    def is_not_negative(self) -> NumberValidator:
        self._check(lambda value: not value < 0, lambda: number_messages.number_is_not_negative(self))
        return self

    def is_zero(self) -> NumberValidator:
        self._check(lambda value: value == 0, lambda: number_messages.number_is_zero(self))
        return self

    def is_not_zero(self) -> NumberValidator:
        self._check(lambda value: value != 0, lambda: number_messages.number_is_not_zero(self))
        return self

    def is_positive(self) -> NumberValidator:
        self._check(lambda value: value > 0, lambda: number_messages.number_is_positive(self))
        return self

    def is_not_positive(self) -> NumberValidator:
        self._check(lambda value: not value > 0, lambda: number_messages.number_is_not_positive(self))
        return self

    def is_greater_than(self, limit: Any, name: str | None = None) -> NumberValidator:
        """Ensure that the value is greater than ``limit``.

        Args:
            limit: The exclusive lower bound.
            name: The name of the bound. If omitted, the message spells out its value.

        Returns:
            Self for method chaining.
        """
        return self._compare(Comparison.GREATER_THAN, limit, name)

    def is_greater_than_or_equal_to(self, limit: Any, name: str | None = None) -> NumberValidator:
        return self._compare(Comparison.GREATER_THAN_OR_EQUAL_TO, limit, name)

    def is_less_than(self, limit: Any, name: str | None = None) -> NumberValidator:
        return self._compare(Comparison.LESS_THAN, limit, name)

    def is_less_than_or_equal_to(self, limit: Any, name: str | None = None) -> NumberValidator:
        return self._compare(Comparison.LESS_THAN_OR_EQUAL_TO, limit, name)

    def is_between(self, start_inclusive: Any, end_exclusive: Any) -> NumberValidator:
        """Ensure that the value is in the range ``[start_inclusive, end_exclusive)``.

        Raises:
            ValueError: If ``end_exclusive`` is less than ``start_inclusive``,
                regardless of the value.
        """
        _require_valid_range(start_inclusive, end_exclusive)
        self._check(
            lambda value: start_inclusive <= value < end_exclusive,
            lambda: self._between_message(start_inclusive, end_exclusive, False),
        )
        return self

    def is_between_closed(self, start_inclusive: Any, end_inclusive: Any) -> NumberValidator:
        """Ensure that the value is in the range ``[start_inclusive, end_inclusive]``.

        Raises:
            ValueError: If ``end_inclusive`` is less than ``start_inclusive``,
                regardless of the value.
        """
        _require_valid_range(start_inclusive, end_inclusive)
        self._check(
            lambda value: start_inclusive <= value <= end_inclusive,
            lambda: self._between_message(start_inclusive, end_inclusive, True),
        )
        return self

    def is_multiple_of(self, factor: Any, name: str | None = None) -> NumberValidator:
        if name is not None:
            require_valid_name(name)
        self._check(
            lambda value: _is_multiple_of(value, factor),
            lambda: number_messages.number_is_multiple_of(self, name, factor),
        )
        return self

    def is_not_multiple_of(self, factor: Any, name: str | None = None) -> NumberValidator:
        if name is not None:
            require_valid_name(name)
        self._check(
            lambda value: not _is_multiple_of(value, factor),
            lambda: number_messages.number_is_not_multiple_of(self, name, factor),
        )
        return self

    def is_whole_number(self) -> NumberValidator:
        self._check(_is_whole_number, lambda: number_messages.number_is_whole_number(self))
        return self

    def is_not_whole_number(self) -> NumberValidator:
        self._check(
            lambda value: not _is_whole_number(value),
            lambda: number_messages.number_is_not_whole_number(self),
        )
        return self

    def is_finite(self) -> NumberValidator:
        self._check(math.isfinite, lambda: number_messages.number_is_finite(self))
        return self

    def is_infinite(self) -> NumberValidator:
        self._check(math.isinf, lambda: number_messages.number_is_infinite(self))
        return self

    def is_number(self) -> NumberValidator:
        """Ensure that the value is not NaN."""
        self._check(lambda value: not math.isnan(value), lambda: number_messages.number_is_number(self))
        return self

    def is_not_number(self) -> NumberValidator:
        """Ensure that the value is NaN."""
        self._check(math.isnan, lambda: number_messages.number_is_not_number(self))
        return self
