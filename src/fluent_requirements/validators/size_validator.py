"""Validator for the size of a collection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message import size_messages
from fluent_requirements.validators.base import require_valid_name
from fluent_requirements.validators.number_validator import Comparison, NumberValidator

if TYPE_CHECKING:
    from fluent_requirements.configuration import Configuration
    from fluent_requirements.global_configuration import GlobalConfiguration
    from fluent_requirements.message.builder import MessageBuilder
    from fluent_requirements.pluralizer import Pluralizer
    from fluent_requirements.target import ValidationTarget
    from fluent_requirements.validators.base import FailureCollector

__all__ = ["SizeValidator"]


class SizeValidator(NumberValidator):
    """Validates the number of elements in a string, list, set or mapping.

    Failure messages describe the collection rather than the number::

        "actual" must contain at least 3 elements.
        actual         : [1, 2]
        actual.length(): 2
    """

    def __init__(
        self,
        scope: GlobalConfiguration,
        configuration: Configuration,
        name: str,
        value: ValidationTarget[int],
        context: dict[str, Any],
        failures: FailureCollector,
        collection_name: str,
        collection: ValidationTarget[Any],
        pluralizer: Pluralizer,
    ) -> None:
        """Initialize the validator.

        Args:
            scope: The process-wide configuration.
            configuration: Determines the behavior of the validator.
            name: The name of the size, for example ``actual.length()``.
            value: The size.
            context: Contextual information to include in failure messages.
            failures: Receives the failures of the validation chain.
            collection_name: The name of the collection.
            collection: The collection.
            pluralizer: The noun used for the collection's elements.
        """
        super().__init__(scope, configuration, name, value, context, failures)
        self._collection_name = collection_name
        self._collection = collection.or_else(None)
        self._pluralizer = pluralizer

    def _comparison_message(self, comparison: Comparison, limit_name: str | None, limit: Any) -> MessageBuilder:
        return size_messages.size_comparison(
            self,
            self._collection_name,
            self._collection,
            comparison.size_phrase,
            limit_name,
            limit,
            self._pluralizer,
        )

    def _between_message(self, start: Any, end: Any, end_inclusive: bool) -> MessageBuilder:
        return size_messages.size_is_between(
            self, self._collection_name, self._collection, start, True, end, end_inclusive, self._pluralizer
        )

    def is_zero(self) -> SizeValidator:
        """Ensure that the collection is empty."""
        self._check(
            lambda value: value == 0,
            lambda: size_messages.size_is_empty(self, self._collection_name, self._collection),
        )
        return self

    def is_not_zero(self) -> SizeValidator:
        """Ensure that the collection is not empty."""
        self._check(
            lambda value: value != 0,
            lambda: size_messages.size_is_not_empty(self, self._collection_name, self._collection),
        )
        return self

    def is_positive(self) -> SizeValidator:
        """Ensure that the collection is not empty."""
        return self.is_not_zero()

    def is_equal_to(self, expected: Any, name: str | None = None) -> SizeValidator:
        """Ensure that the collection contains exactly ``expected`` elements."""
        if name is not None:
            require_valid_name(name)
        self._check(
            lambda value: value == expected,
            lambda: size_messages.size_comparison(
                self,
                self._collection_name,
                self._collection,
                "must contain exactly",
                name,
                expected,
                self._pluralizer,
            ),
        )
        return self

    def is_not_equal_to(self, unwanted: Any, name: str | None = None) -> SizeValidator:
        """Ensure that the collection does not contain exactly ``unwanted`` elements."""
        if name is not None:
            require_valid_name(name)
        self._check(
            lambda value: value != unwanted,
            lambda: size_messages.size_comparison(
                self,
                self._collection_name,
                self._collection,
                "may not contain exactly",
                name,
                unwanted,
                self._pluralizer,
            ),
        )
        return self
