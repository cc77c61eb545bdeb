"""Abstract base validator and the failure collector shared by a validation chain.

Every predicate follows the same template::

    if self._value.validation_failed(predicate):
        self._fail_on_none()
        self._add_value_error(message_function(self, ...))
    return self

Validators derived from another validator (``length()``, ``keys()``, ...)
share the parent's ``FailureCollector`` so that every failure of the chain
ends up in one place.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from fluent_requirements.errors import IllegalStateError
from fluent_requirements.failures import ErrorBuilder, ValidationFailure, ValidationFailures
from fluent_requirements.message import object_messages
from fluent_requirements.target import ValidationTarget

if TYPE_CHECKING:
    from fluent_requirements.configuration import Configuration
    from fluent_requirements.global_configuration import GlobalConfiguration
    from fluent_requirements.message.builder import MessageBuilder

__all__ = ["AbstractValidator", "FailureCollector", "require_valid_name"]

T = TypeVar("T")
S = TypeVar("S", bound="AbstractValidator[Any]")
V = TypeVar("V", bound="AbstractValidator[Any]")


def require_valid_name(name: Any, parameter: str = "name") -> str:
    """Check that ``name`` can identify a value in a failure message.

    Raises:
        TypeError: If ``name`` is not a string.
        ValueError: If ``name`` is empty or contains whitespace.
    """
    if not isinstance(name, str):
        raise TypeError(f"{parameter} must be a str.\nactual: {type(name).__qualname__}")
    if not name or name.isspace():
        raise ValueError(f"{parameter} may not be empty.")
    if any(character.isspace() for character in name):
        raise ValueError(f'{parameter} may not contain whitespace.\nactual: "{name}"')
    return name


class FailureCollector:
    """Mutable list of the failures recorded by a validation chain.

    A new collector is created for every ``require_that()``, ``assert_that()``
    or ``check_if()`` call and passed by reference to every validator derived
    from that root.
    """

    def __init__(self) -> None:
        self._failures: list[ValidationFailure] = []

    def add(self, failure: ValidationFailure) -> None:
        self._failures.append(failure)

    def is_empty(self) -> bool:
        return not self._failures

    def to_failures(self) -> ValidationFailures:
        """Return an immutable snapshot of the failures recorded so far."""
        return ValidationFailures(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self._failures)


class AbstractValidator(Generic[T]):
    """Validates a value.

    Generic over T, the type of the value being validated. Predicates
    return the validator itself so that calls can be chained.

    Whether a failed predicate raises, or only records the failure, depends
    on the configuration: ``require_that()`` raises the first failure,
    ``check_if()`` collects them all for ``else_get_failures()``.

    Example:
        require_that(port, "port").is_instance_of(int).is_between(1, 65536)

        failures = check_if(name, "name").is_not_empty().is_trimmed().else_get_failures()
    """

    def __init__(
        self,
        scope: GlobalConfiguration,
        configuration: Configuration,
        name: str,
        value: ValidationTarget[T],
        context: dict[str, Any],
        failures: FailureCollector,
    ) -> None:
        """Initialize the validator.

        Args:
            scope: The process-wide configuration.
            configuration: Determines the behavior of the validator.
            name: The name of the value. May not be empty or contain whitespace.
            value: The value being validated.
            context: Contextual information to include in failure messages.
            failures: Receives the failures of the validation chain.
        """
        self._scope = scope
        self._configuration = configuration
        self._name = require_valid_name(name)
        self._value = value
        self._context = context
        self._failures = failures

    # ValidatorProtocol

    def get_name(self) -> str:
        return self._name

    def get_target(self) -> ValidationTarget[T]:
        return self._value

    def get_context(self) -> dict[str, Any]:
        """Get a copy of the contextual information added by ``with_context()``."""
        return dict(self._context)

    def get_configuration(self) -> Configuration:
        return self._configuration

    # Value access

    def get_value(self) -> T:
        """Get the value being validated.

        Raises:
            IllegalStateError: If the value is unavailable because an earlier
                step of the chain failed, for example converting None to a
                collection.
        """
        return self._value.or_raise(
            lambda: IllegalStateError(f"The value of {self._name} is unavailable because a validation failed.")
        )

    def get_value_or_default(self, default: T) -> T:
        """Get the value being validated, or ``default`` if it is unavailable."""
        return self._value.or_else(default)

    def with_context(self: S, value: Any, name: str) -> S:
        """Include ``name: value`` in the messages of failures recorded from now on.

        Returns:
            Self for method chaining.
        """
        self._context[require_valid_name(name)] = value
        return self

    # Failure recording

    def _add_failure(self, error_builder: ErrorBuilder, message: MessageBuilder | str) -> None:
        failure = ValidationFailure(self._configuration, error_builder, str(message))
        self._failures.add(failure)
        if self._configuration.throw_on_failure:
            raise failure.get_error()

    def _add_value_error(self, message: MessageBuilder | str) -> None:
        self._add_failure(ValueError, message)

    def _add_type_error(self, message: MessageBuilder | str) -> None:
        self._add_failure(TypeError, message)

    def _fail_on_none(self) -> None:
        """Record that the value may not be None, if it is."""
        if self._value.is_none():
            self._add_type_error(object_messages.object_is_not_none(self))

    def _derive(self, validator_class: Callable[..., V], name: str, value: ValidationTarget[Any], *args: Any) -> V:
        """Create a validator that shares this validator's failures."""
        return validator_class(
            self._scope, self._configuration, name, value, self.get_context(), self._failures, *args
        )

    def _derive_from_non_none(
        self, validator_class: Callable[..., V], name: str, mapper: Callable[[T], Any], *args: Any
    ) -> V:
        """Create a validator for a value computed from this validator's value.

        A None value cannot be mapped; it is recorded as a failure and the
        derived validator's value becomes unavailable.
        """
        self._fail_on_none()
        return self._derive(validator_class, name, self._value.none_to_invalid().map(mapper), *args)

    # Results

    def validation_failed(self) -> bool:
        """Check if any validation of the chain failed."""
        return not self._failures.is_empty()

    def else_get_failures(self) -> ValidationFailures:
        """Get the failures of the chain."""
        return self._failures.to_failures()

    def else_get_messages(self) -> list[str]:
        """Get the messages of the failures of the chain."""
        return self.else_get_failures().get_messages()

    def else_throw(self) -> bool:
        """Raise an error if any validation of the chain failed.

        Returns:
            True if no validation failed.

        Raises:
            BaseException: The failure's error if exactly one validation failed,
                otherwise a ``MultipleFailuresError``.
        """
        self.else_get_failures().raise_on_failure()
        return True

    def and_(self: S, validation: Callable[[S], Any]) -> S:
        """Run nested validations against this validator.

        Example:
            require_that(user, "user").and_(
                lambda v: v.is_not_none().with_context(user.id, "id")
            )

        Returns:
            Self for method chaining.

        Raises:
            TypeError: If ``validation`` is not callable.
        """
        if not callable(validation):
            raise TypeError(f"validation must be callable.\nactual: {validation!r}")
        validation(self)
        return self

    # Predicates that apply to any value

    def is_none(self: S) -> S:
        if self._value.validation_failed(lambda value: value is None):
            self._add_value_error(object_messages.object_is_none(self))
        return self

    def is_not_none(self: S) -> S:
        if self._value.validation_failed(lambda value: value is not None):
            self._add_type_error(object_messages.object_is_not_none(self))
        return self

    def is_equal_to(self: S, expected: Any, name: str | None = None) -> S:
        """Ensure that the value is equal to ``expected``.

        Args:
            expected: The expected value.
            name: The name of the expected value. If omitted, the message spells
                out the expected value.

        Returns:
            Self for method chaining.
        """
        if name is not None:
            require_valid_name(name)
        if self._value.validation_failed(lambda value: value == expected):
            self._add_value_error(object_messages.object_is_equal_to(self, name, expected))
        return self

    def is_not_equal_to(self: S, unwanted: Any, name: str | None = None) -> S:
        if name is not None:
            require_valid_name(name)
        if self._value.validation_failed(lambda value: value != unwanted):
            self._add_value_error(object_messages.object_is_not_equal_to(self, name, unwanted))
        return self

    def is_same_reference_as(self: S, expected: Any, name: str) -> S:
        """Ensure that the value is the same object as ``expected``."""
        require_valid_name(name)
        if self._value.validation_failed(lambda value: value is expected):
            self._add_value_error(object_messages.object_is_same_reference_as(self, name, expected))
        return self

    def is_not_same_reference_as(self: S, unwanted: Any, name: str) -> S:
        require_valid_name(name)
        if self._value.validation_failed(lambda value: value is not unwanted):
            self._add_value_error(object_messages.object_is_not_same_reference_as(self, name, unwanted))
        return self

    def is_instance_of(self: S, expected: type | tuple[type, ...]) -> S:
        """Ensure that the value is an instance of ``expected``, as determined by ``isinstance()``."""
        if self._value.validation_failed(lambda value: isinstance(value, expected)):
            self._add_type_error(object_messages.object_is_instance_of(self, expected))
        return self

    def is_not_instance_of(self: S, unwanted: type | tuple[type, ...]) -> S:
        if self._value.validation_failed(lambda value: not isinstance(value, unwanted)):
            self._add_type_error(object_messages.object_is_not_instance_of(self, unwanted))
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, value={self._value!r})"
