"""Validators for lists and sets.

Comparisons between collections use set semantics: the order and number
of occurrences of an element do not matter. Elements are compared with
``==``, so unhashable elements are supported.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from fluent_requirements.message import collection_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.pluralizer import Pluralizer
from fluent_requirements.validators.base import AbstractValidator, require_valid_name
from fluent_requirements.validators.size_validator import SizeValidator

if TYPE_CHECKING:
    from fluent_requirements.configuration import Configuration
    from fluent_requirements.global_configuration import GlobalConfiguration
    from fluent_requirements.target import ValidationTarget
    from fluent_requirements.validators.base import FailureCollector

__all__ = ["AbstractCollectionValidator", "ListValidator", "SetValidator", "difference", "unique"]

C = TypeVar("C", bound=Collection[Any])
CV = TypeVar("CV", bound="AbstractCollectionValidator[Any]")


def unique(elements: Iterable[Any]) -> list[Any]:
    """Return the distinct elements, in order of first occurrence."""
    result: list[Any] = []
    for element in elements:
        if element not in result:
            result.append(element)
    return result


def difference(actual: Iterable[Any], other: Iterable[Any]) -> tuple[list[Any], list[Any], list[Any]]:
    """Compare two collections as sets.

    Returns:
        ``(common, only_in_actual, only_in_other)``: the distinct elements
        present in both collections, only in ``actual``, and only in ``other``.
    """
    actual_elements = unique(actual)
    other_elements = unique(other)
    common = [element for element in actual_elements if element in other_elements]
    only_in_actual = [element for element in actual_elements if element not in other_elements]
    only_in_other = [element for element in other_elements if element not in actual_elements]
    return common, only_in_actual, only_in_other


class AbstractCollectionValidator(AbstractValidator[C], Generic[C]):
    """Predicates shared by list and set validators."""

    def __init__(
        self,
        scope: GlobalConfiguration,
        configuration: Configuration,
        name: str,
        value: ValidationTarget[C],
        context: dict[str, Any],
        failures: FailureCollector,
        pluralizer: Pluralizer = Pluralizer.ELEMENT,
    ) -> None:
        """Initialize the validator.

        Args:
            scope: The process-wide configuration.
            configuration: Determines the behavior of the validator.
            name: The name of the collection.
            value: The collection.
            context: Contextual information to include in failure messages.
            failures: Receives the failures of the validation chain.
            pluralizer: The noun used for the elements in size messages.
        """
        super().__init__(scope, configuration, name, value, context, failures)
        self._pluralizer = pluralizer

    def _check(self: CV, predicate: Callable[[Any], bool], message: Callable[[], MessageBuilder]) -> CV:
        if self._value.none_to_invalid().validation_failed(predicate):
            self._fail_on_none()
            self._add_value_error(message())
        return self

    def is_empty(self: CV) -> CV:
        return self._check(
            lambda value: len(value) == 0,
            lambda: collection_messages.collection_is_empty(self),
        )

    def is_not_empty(self: CV) -> CV:
        return self._check(lambda value: len(value) != 0, lambda: collection_messages.collection_is_not_empty(self))

    def contains(self: CV, expected: Any, name: str | None = None) -> CV:
        """Ensure that the collection contains ``expected``."""
        if name is not None:
            require_valid_name(name)
        return self._check(
            lambda value: expected in value,
            lambda: collection_messages.collection_contains(self, name, expected),
        )

    def does_not_contain(self: CV, unwanted: Any, name: str | None = None) -> CV:
        if name is not None:
            require_valid_name(name)
        return self._check(
            lambda value: unwanted not in value,
            lambda: collection_messages.collection_does_not_contain(self, name, unwanted),
        )

    def contains_exactly(self: CV, expected: Collection[Any], name: str | None = None) -> CV:
        """Ensure that the collection contains all of ``expected`` and nothing else, in any order.

        Args:
            expected: The elements the collection must contain.
            name: The name of ``expected``. If omitted, the message spells out its value.

        Returns:
            Self for method chaining.
        """
        if name is not None:
            require_valid_name(name)
        differences: tuple[list[Any], list[Any], list[Any]] = ([], [], [])

        def has_same_elements(value: Any) -> bool:
            nonlocal differences
            differences = difference(value, expected)
            return not differences[1] and not differences[2]

        return self._check(
            has_same_elements,
            lambda: collection_messages.collection_contains_exactly(
                self, differences[1], differences[2], name, expected
            ),
        )

    def does_not_contain_exactly(self: CV, unwanted: Collection[Any], name: str | None = None) -> CV:
        """Ensure that the collection does not contain exactly the elements of ``unwanted``, in any order."""
        if name is not None:
            require_valid_name(name)

        def has_different_elements(value: Any) -> bool:
            _, only_in_actual, only_in_other = difference(value, unwanted)
            return bool(only_in_actual or only_in_other)

        return self._check(
            has_different_elements,
            lambda: collection_messages.collection_does_not_contain_exactly(self, name, unwanted),
        )

    def contains_any(self: CV, expected: Collection[Any], name: str | None = None) -> CV:
        """Ensure that the collection contains at least one element of ``expected``."""
        if name is not None:
            require_valid_name(name)
        return self._check(
            lambda value: bool(difference(value, expected)[0]),
            lambda: collection_messages.collection_contains_any(self, name, expected),
        )

    def does_not_contain_any(self: CV, unwanted: Collection[Any], name: str | None = None) -> CV:
        """Ensure that the collection contains none of the elements of ``unwanted``."""
        if name is not None:
            require_valid_name(name)
        common: list[Any] = []

        def has_no_common_elements(value: Any) -> bool:
            nonlocal common
            common = difference(value, unwanted)[0]
            return not common

        return self._check(
            has_no_common_elements,
            lambda: collection_messages.collection_does_not_contain_any(self, common, name, unwanted),
        )

    def contains_all(self: CV, expected: Collection[Any], name: str | None = None) -> CV:
        """Ensure that the collection contains every element of ``expected``."""
        if name is not None:
            require_valid_name(name)
        missing: list[Any] = []

        def has_all_elements(value: Any) -> bool:
            nonlocal missing
            missing = difference(value, expected)[2]
            return not missing

        return self._check(
            has_all_elements,
            lambda: collection_messages.collection_contains_all(self, missing, name, expected),
        )

    def does_not_contain_all(self: CV, unwanted: Collection[Any], name: str | None = None) -> CV:
        """Ensure that the collection is missing at least one element of ``unwanted``.

        Fails only if every element of a non-empty ``unwanted`` is present.
        Use ``does_not_contain_any()`` to reject collections that contain some
        of the elements.
        """
        if name is not None:
            require_valid_name(name)
        unwanted_elements = list(unwanted)
        return self._check(
            lambda value: not unwanted_elements or bool(difference(value, unwanted_elements)[2]),
            lambda: collection_messages.collection_does_not_contain_all(self, name, unwanted),
        )

    def size(self) -> SizeValidator:
        """Validate the number of elements in the collection."""
        return self._derive_from_non_none(
            SizeValidator, f"{self._name}.size()", len, self._name, self._value, self._pluralizer
        )

    def length(self) -> SizeValidator:
        """Validate the number of elements in the collection."""
        return self._derive_from_non_none(
            SizeValidator, f"{self._name}.length()", len, self._name, self._value, self._pluralizer
        )


class ListValidator(AbstractCollectionValidator[Any]):
    """Validates a ``list`` or ``tuple``.

    Example:
        require_that(ports, "ports").is_not_empty().does_not_contain_duplicates()
        require_that(roles, "roles").contains_all(["reader"]).length().is_less_than(10)
    """

    def does_not_contain_duplicates(self) -> ListValidator:
        duplicates: list[Any] = []

        def has_no_duplicates(value: Any) -> bool:
            nonlocal duplicates
            seen: list[Any] = []
            duplicates = []
            for element in value:
                if element in seen:
                    if element not in duplicates:
                        duplicates.append(element)
                else:
                    seen.append(element)
            return not duplicates

        return self._check(
            has_no_duplicates,
            lambda: collection_messages.collection_does_not_contain_duplicates(self, duplicates),
        )

    def is_sorted(self, key: Callable[[Any], Any] | None = None, reverse: bool = False) -> ListValidator:
        """Ensure that the elements are in sorted order.

        Args:
            key: Extracts the comparison key from each element, as in ``sorted()``.
            reverse: True if the elements must be in descending order.

        Returns:
            Self for method chaining.
        """
        expected: list[Any] | None = None

        def is_in_order(value: Any) -> bool:
            nonlocal expected
            try:
                expected = sorted(value, key=key, reverse=reverse)
            except TypeError:
                # The elements cannot be compared with each other
                expected = None
                return False
            return list(value) == expected

        return self._check(is_in_order, lambda: collection_messages.collection_is_sorted(self, expected))

    def as_set(self) -> SetValidator:
        """Validate the distinct elements of the list. The elements must be hashable."""
        return self._derive_from_non_none(SetValidator, f"{self._name}.as_set()", set, self._pluralizer)


class SetValidator(AbstractCollectionValidator[Any]):
    """Validates a ``set`` or ``frozenset``."""

    def as_list(self) -> ListValidator:
        """Validate the elements of the set as a list, in iteration order."""
        return self._derive_from_non_none(ListValidator, f"{self._name}.as_list()", list, self._pluralizer)
