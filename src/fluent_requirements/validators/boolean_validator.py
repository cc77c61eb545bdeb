"""Validator for booleans."""

from __future__ import annotations

from fluent_requirements.message import boolean_messages
from fluent_requirements.validators.base import AbstractValidator

__all__ = ["BooleanValidator"]


class BooleanValidator(AbstractValidator[bool]):
    """Validates a ``bool``."""

    def is_true(self) -> BooleanValidator:
        if self._value.none_to_invalid().validation_failed(lambda value: value is True):
            self._fail_on_none()
            self._add_value_error(boolean_messages.boolean_is_true(self))
        return self

    def is_false(self) -> BooleanValidator:
        if self._value.none_to_invalid().validation_failed(lambda value: value is False):
            self._fail_on_none()
            self._add_value_error(boolean_messages.boolean_is_false(self))
        return self
