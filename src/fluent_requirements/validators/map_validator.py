"""Validator for mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from fluent_requirements.message import collection_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.pluralizer import Pluralizer
from fluent_requirements.validators.base import AbstractValidator, require_valid_name
from fluent_requirements.validators.collection_validator import ListValidator, SetValidator
from fluent_requirements.validators.size_validator import SizeValidator

__all__ = ["MapValidator"]


class MapValidator(AbstractValidator[Mapping[Any, Any]]):
    """Validates a ``dict`` or any other ``Mapping``.

    Example:
        require_that(headers, "headers").contains_key("Host").keys().does_not_contain("Cookie")
    """

    def _check(self, predicate: Callable[[Mapping[Any, Any]], bool], message: Callable[[], MessageBuilder]) -> MapValidator:
        if self._value.none_to_invalid().validation_failed(predicate):
            self._fail_on_none()
            self._add_value_error(message())
        return self

    def is_empty(self) -> MapValidator:
        return self._check(lambda value: len(value) == 0, lambda: collection_messages.collection_is_empty(self))

    def is_not_empty(self) -> MapValidator:
        return self._check(lambda value: len(value) != 0, lambda: collection_messages.collection_is_not_empty(self))

    def contains_key(self, key: Any, name: str | None = None) -> MapValidator:
        if name is not None:
            require_valid_name(name)
        return self._check(lambda value: key in value, lambda: collection_messages.map_contains_key(self, name, key))

    def does_not_contain_key(self, key: Any, name: str | None = None) -> MapValidator:
        if name is not None:
            require_valid_name(name)
        return self._check(
            lambda value: key not in value,
            lambda: collection_messages.map_does_not_contain_key(self, name, key),
        )

    def keys(self) -> SetValidator:
        """Validate the mapping's keys."""
        return self._derive_from_non_none(
            SetValidator, f"{self._name}.keys()", lambda value: set(value.keys()), Pluralizer.KEY
        )

    def values(self) -> ListValidator:
        """Validate the mapping's values, in iteration order."""
        return self._derive_from_non_none(
            ListValidator, f"{self._name}.values()", lambda value: list(value.values()), Pluralizer.VALUE
        )

    def entries(self) -> ListValidator:
        """Validate the mapping's ``(key, value)`` pairs, in iteration order."""
        return self._derive_from_non_none(
            ListValidator, f"{self._name}.entries()", lambda value: list(value.items()), Pluralizer.ENTRY
        )

    def size(self) -> SizeValidator:
        """Validate the number of entries in the mapping."""
        return self._derive_from_non_none(
            SizeValidator, f"{self._name}.size()", len, self._name, self._value, Pluralizer.ENTRY
        )
