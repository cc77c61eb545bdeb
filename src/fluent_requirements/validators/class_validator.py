"""Validator for classes."""

from __future__ import annotations

from typing import Callable

from fluent_requirements.message import class_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.validators.base import AbstractValidator

__all__ = ["ClassValidator"]


def _require_class(klass: object, parameter: str) -> type:
    if not isinstance(klass, type):
        raise TypeError(f"{parameter} must be a class.\nactual: {klass!r}")
    return klass


class ClassValidator(AbstractValidator[type]):
    """Validates a class.

    Example:
        require_that(handler_class, "handler_class").as_class().is_subtype_of(BaseHandler)
    """

    def _check(self, predicate: Callable[[type], bool], message: Callable[[], MessageBuilder]) -> ClassValidator:
        if self._value.none_to_invalid().validation_failed(predicate):
            self._fail_on_none()
            self._add_value_error(message())
        return self

    def is_supertype_of(self, subtype: type) -> ClassValidator:
        """Ensure that the class is ``subtype`` or one of its base classes.

        Raises:
            TypeError: If ``subtype`` is not a class.
        """
        _require_class(subtype, "subtype")
        return self._check(
            lambda value: issubclass(subtype, value),
            lambda: class_messages.class_is_supertype_of(self, subtype),
        )

    def is_subtype_of(self, supertype: type) -> ClassValidator:
        """Ensure that the class is ``supertype`` or one of its subclasses.

        Raises:
            TypeError: If ``supertype`` is not a class.
        """
        _require_class(supertype, "supertype")
        return self._check(
            lambda value: issubclass(value, supertype),
            lambda: class_messages.class_is_subtype_of(self, supertype),
        )
