"""Factories that start validation chains.

A factory owns three configurations derived from one base configuration:
``require_that()`` raises the failure's own error, ``assert_that()`` raises
an ``AssertionError``, and ``check_if()`` only collects failures.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping
from typing import Any, Callable, TypeVar, overload

from fluent_requirements.configuration import Configuration, ConfigurationUpdater
from fluent_requirements.global_configuration import GlobalConfiguration, get_global_configuration
from fluent_requirements.target import ValidationTarget
from fluent_requirements.validators.base import AbstractValidator, FailureCollector, require_valid_name
from fluent_requirements.validators.boolean_validator import BooleanValidator
from fluent_requirements.validators.collection_validator import ListValidator, SetValidator
from fluent_requirements.validators.map_validator import MapValidator
from fluent_requirements.validators.number_validator import NumberValidator
from fluent_requirements.validators.object_validator import ObjectValidator
from fluent_requirements.validators.string_validator import StringValidator

__all__ = ["AbstractValidators", "Validators", "to_assertion_error"]

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=AbstractValidator[Any])
R = TypeVar("R")
F = TypeVar("F", bound="AbstractValidators")


def to_assertion_error(error: BaseException) -> BaseException:
    """Wrap ``error`` in an ``AssertionError`` with the same message."""
    if isinstance(error, AssertionError):
        return error
    assertion = AssertionError(str(error))
    assertion.__cause__ = error
    return assertion


def validator_class_for(value: Any) -> type[AbstractValidator[Any]]:
    """Return the most specific validator class for the runtime type of ``value``."""
    if isinstance(value, bool):
        return BooleanValidator
    if isinstance(value, numbers.Real):
        return NumberValidator
    if isinstance(value, str):
        return StringValidator
    if isinstance(value, (list, tuple)):
        return ListValidator
    if isinstance(value, (set, frozenset)):
        return SetValidator
    if isinstance(value, Mapping):
        return MapValidator
    return ObjectValidator


class AbstractValidators:
    """Owns the configuration and context shared by the validators a factory creates.

    Global settings (diff support and terminal capabilities) are read once,
    when the factory is created.
    """

    def __init__(
        self,
        scope: GlobalConfiguration | None = None,
        configuration: Configuration | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            scope: The process-wide configuration. Defaults to
                ``get_global_configuration()``.
            configuration: The base configuration. Defaults to ``Configuration()``.
        """
        self._scope = scope if scope is not None else get_global_configuration()
        base = configuration if configuration is not None else Configuration()
        base = base.with_terminal(self._scope.terminal_encoding, self._scope.terminal_width)
        if not self._scope.diff_enabled:
            base = base.with_allow_diff(False)
        self._context: dict[str, Any] = {}
        self._set_configuration(base)

    def _set_configuration(self, configuration: Configuration) -> None:
        logger.debug("Using configuration %r", configuration)
        self._require_that_configuration = configuration
        self._assert_that_configuration = configuration.with_error_transformer(to_assertion_error)
        self._check_if_configuration = configuration.with_throw_on_failure(False)

    def get_scope(self) -> GlobalConfiguration:
        return self._scope

    def configuration(self) -> Configuration:
        """Get the base configuration, used by ``require_that()``."""
        return self._require_that_configuration

    def update_configuration(self) -> ConfigurationUpdater:
        """Start updating the configuration. The changes apply once the updater is closed.

        Example:
            with validators.update_configuration() as updater:
                updater.allow_diff(False)
        """
        return ConfigurationUpdater(self._require_that_configuration, self._set_configuration)

    def get_context(self) -> dict[str, Any]:
        """Get a copy of the context inherited by new validators."""
        return dict(self._context)

    def with_context(self: F, value: Any, name: str) -> F:
        """Include ``name: value`` in the failure messages of validators created from now on.

        Returns:
            Self for method chaining.
        """
        self._context[require_valid_name(name)] = value
        return self

    def remove_context(self: F, name: str) -> F:
        """Stop including ``name`` in the failure messages of new validators.

        Returns:
            Self for method chaining.
        """
        self._context.pop(require_valid_name(name), None)
        return self

    def copy(self: F) -> F:
        """Return a factory with the same configuration and an independent copy of the context."""
        result = self.__class__.__new__(self.__class__)
        result._scope = self._scope
        result._context = dict(self._context)
        result._set_configuration(self._require_that_configuration)
        return result

    def _new_validator(
        self, validator_class: Callable[..., V], configuration: Configuration, value: Any, name: str
    ) -> V:
        return validator_class(
            self._scope,
            configuration,
            require_valid_name(name),
            ValidationTarget.valid(value),
            self.get_context(),
            FailureCollector(),
        )


class Validators(AbstractValidators):
    """Creates validators for values of any type.

    Example:
        validators = Validators()
        validators.require_that(port, "port").is_between(1, 65536)

        failures = validators.check_if(name, "name").is_not_blank().else_get_failures()
    """

    @overload
    def require_that(self, value: bool, name: str) -> BooleanValidator: ...

    @overload
    def require_that(self, value: str, name: str) -> StringValidator: ...

    @overload
    def require_that(self, value: int | float, name: str) -> NumberValidator: ...

    @overload
    def require_that(self, value: list[Any] | tuple[Any, ...], name: str) -> ListValidator: ...

    @overload
    def require_that(self, value: set[Any] | frozenset[Any], name: str) -> SetValidator: ...

    @overload
    def require_that(self, value: Mapping[Any, Any], name: str) -> MapValidator: ...

    @overload
    def require_that(self, value: Any, name: str) -> ObjectValidator: ...

    def require_that(self, value: Any, name: str) -> AbstractValidator[Any]:
        """Validate a value, raising an error as soon as a validation fails.

        The validator is chosen by the runtime type of ``value``. Use the
        ``require_that_*`` variants to choose it explicitly, for example to
        validate a number that may be None.

        Args:
            value: The value.
            name: The name of the value, used in failure messages.

        Returns:
            A validator for the value.

        Raises:
            TypeError: If ``name`` is not a string.
            ValueError: If ``name`` is empty or contains whitespace.
        """
        return self._new_validator(validator_class_for(value), self._require_that_configuration, value, name)

    def require_that_object(self, value: Any, name: str) -> ObjectValidator:
        return self._new_validator(ObjectValidator, self._require_that_configuration, value, name)

    def require_that_boolean(self, value: bool | None, name: str) -> BooleanValidator:
        return self._new_validator(BooleanValidator, self._require_that_configuration, value, name)

    def require_that_number(self, value: Any, name: str) -> NumberValidator:
        return self._new_validator(NumberValidator, self._require_that_configuration, value, name)

    def require_that_string(self, value: str | None, name: str) -> StringValidator:
        return self._new_validator(StringValidator, self._require_that_configuration, value, name)

    def require_that_list(self, value: Any, name: str) -> ListValidator:
        return self._new_validator(ListValidator, self._require_that_configuration, value, name)

    def require_that_set(self, value: Any, name: str) -> SetValidator:
        return self._new_validator(SetValidator, self._require_that_configuration, value, name)

    def require_that_map(self, value: Mapping[Any, Any] | None, name: str) -> MapValidator:
        return self._new_validator(MapValidator, self._require_that_configuration, value, name)

    @overload
    def check_if(self, value: bool, name: str) -> BooleanValidator: ...

    @overload
    def check_if(self, value: str, name: str) -> StringValidator: ...

    @overload
    def check_if(self, value: int | float, name: str) -> NumberValidator: ...

    @overload
    def check_if(self, value: list[Any] | tuple[Any, ...], name: str) -> ListValidator: ...

    @overload
    def check_if(self, value: set[Any] | frozenset[Any], name: str) -> SetValidator: ...

    @overload
    def check_if(self, value: Mapping[Any, Any], name: str) -> MapValidator: ...

    @overload
    def check_if(self, value: Any, name: str) -> ObjectValidator: ...

    def check_if(self, value: Any, name: str) -> AbstractValidator[Any]:
        """Validate a value, collecting failures instead of raising them.

        Read the failures with ``else_get_failures()`` or raise them with
        ``else_throw()`` at the end of the chain.
        """
        return self._new_validator(validator_class_for(value), self._check_if_configuration, value, name)

    def check_if_object(self, value: Any, name: str) -> ObjectValidator:
        return self._new_validator(ObjectValidator, self._check_if_configuration, value, name)

    def check_if_boolean(self, value: bool | None, name: str) -> BooleanValidator:
        return self._new_validator(BooleanValidator, self._check_if_configuration, value, name)

    def check_if_number(self, value: Any, name: str) -> NumberValidator:
        return self._new_validator(NumberValidator, self._check_if_configuration, value, name)

    def check_if_string(self, value: str | None, name: str) -> StringValidator:
        return self._new_validator(StringValidator, self._check_if_configuration, value, name)

    def check_if_list(self, value: Any, name: str) -> ListValidator:
        return self._new_validator(ListValidator, self._check_if_configuration, value, name)

    def check_if_set(self, value: Any, name: str) -> SetValidator:
        return self._new_validator(SetValidator, self._check_if_configuration, value, name)

    def check_if_map(self, value: Mapping[Any, Any] | None, name: str) -> MapValidator:
        return self._new_validator(MapValidator, self._check_if_configuration, value, name)

    def _asserting(self) -> Validators:
        view = Validators.__new__(Validators)
        view._scope = self._scope
        view._context = self.get_context()
        view._set_configuration(self._assert_that_configuration)
        return view

    def assert_that(self, validation: Callable[[Validators], Any]) -> None:
        """Run ``validation`` only if assertions are enabled.

        The factory passed to ``validation`` raises ``AssertionError`` for
        every failure.

        Example:
            validators.assert_that(lambda v: v.require_that(state, "state").is_not_none())
        """
        self.assert_that_and_return(validation)

    def assert_that_and_return(self, validation: Callable[[Validators], R]) -> R | None:
        """Run ``validation`` only if assertions are enabled.

        Returns:
            The result of ``validation``, or None if assertions are disabled.
        """
        if not callable(validation):
            raise TypeError(f"validation must be callable.\nactual: {validation!r}")
        if not self._scope.assertions_enabled:
            return None
        return validation(self._asserting())

