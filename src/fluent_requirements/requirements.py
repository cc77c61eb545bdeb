"""Module-level entry points backed by a shared ``Validators`` instance.

Example:
    from fluent_requirements import require_that, check_if

    require_that(timeout, "timeout").is_positive()
    failures = check_if(name, "name").is_not_blank().length().is_less_than(64).else_get_failures()
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any, Callable, TypeVar, overload

from fluent_requirements.configuration import Configuration, ConfigurationUpdater
from fluent_requirements.factory import Validators
from fluent_requirements.validators.base import AbstractValidator
from fluent_requirements.validators.boolean_validator import BooleanValidator
from fluent_requirements.validators.collection_validator import ListValidator, SetValidator
from fluent_requirements.validators.map_validator import MapValidator
from fluent_requirements.validators.number_validator import NumberValidator
from fluent_requirements.validators.object_validator import ObjectValidator
from fluent_requirements.validators.string_validator import StringValidator

__all__ = [
    "assert_that",
    "assert_that_and_return",
    "check_if",
    "check_if_boolean",
    "check_if_list",
    "check_if_map",
    "check_if_number",
    "check_if_object",
    "check_if_set",
    "check_if_string",
    "configuration",
    "get_validators",
    "remove_context",
    "require_that",
    "require_that_boolean",
    "require_that_list",
    "require_that_map",
    "require_that_number",
    "require_that_object",
    "require_that_set",
    "require_that_string",
    "update_configuration",
    "with_context",
]

R = TypeVar("R")

_lock = threading.Lock()
_validators: Validators | None = None


def get_validators() -> Validators:
    """Return the factory behind the module-level functions, creating it on first use.

    The factory reads the global configuration when it is created, so change
    global settings before the first validation.
    """
    global _validators
    if _validators is None:
        with _lock:
            if _validators is None:
                _validators = Validators()
    return _validators


@overload
def require_that(value: bool, name: str) -> BooleanValidator: ...


@overload
def require_that(value: str, name: str) -> StringValidator: ...


@overload
def require_that(value: int | float, name: str) -> NumberValidator: ...


@overload
def require_that(value: list[Any] | tuple[Any, ...], name: str) -> ListValidator: ...


@overload
def require_that(value: set[Any] | frozenset[Any], name: str) -> SetValidator: ...


@overload
def require_that(value: Mapping[Any, Any], name: str) -> MapValidator: ...


@overload
def require_that(value: Any, name: str) -> ObjectValidator: ...


def require_that(value: Any, name: str) -> AbstractValidator[Any]:
    """Validate a value, raising an error as soon as a validation fails.

    Args:
        value: The value.
        name: The name of the value, used in failure messages.

    Returns:
        A validator chosen by the runtime type of ``value``.
    """
    return get_validators().require_that(value, name)


def require_that_object(value: Any, name: str) -> ObjectValidator:
    return get_validators().require_that_object(value, name)


def require_that_boolean(value: bool | None, name: str) -> BooleanValidator:
    return get_validators().require_that_boolean(value, name)


def require_that_number(value: Any, name: str) -> NumberValidator:
    return get_validators().require_that_number(value, name)


def require_that_string(value: str | None, name: str) -> StringValidator:
    return get_validators().require_that_string(value, name)


def require_that_list(value: Any, name: str) -> ListValidator:
    return get_validators().require_that_list(value, name)


def require_that_set(value: Any, name: str) -> SetValidator:
    return get_validators().require_that_set(value, name)


def require_that_map(value: Mapping[Any, Any] | None, name: str) -> MapValidator:
    return get_validators().require_that_map(value, name)


@overload
def check_if(value: bool, name: str) -> BooleanValidator: ...


@overload
def check_if(value: str, name: str) -> StringValidator: ...


@overload
def check_if(value: int | float, name: str) -> NumberValidator: ...


@overload
def check_if(value: list[Any] | tuple[Any, ...], name: str) -> ListValidator: ...


@overload
def check_if(value: set[Any] | frozenset[Any], name: str) -> SetValidator: ...


@overload
def check_if(value: Mapping[Any, Any], name: str) -> MapValidator: ...


@overload
def check_if(value: Any, name: str) -> ObjectValidator: ...


def check_if(value: Any, name: str) -> AbstractValidator[Any]:
    """Validate a value, collecting failures instead of raising them."""
    return get_validators().check_if(value, name)


def check_if_object(value: Any, name: str) -> ObjectValidator:
    return get_validators().check_if_object(value, name)


def check_if_boolean(value: bool | None, name: str) -> BooleanValidator:
    return get_validators().check_if_boolean(value, name)


def check_if_number(value: Any, name: str) -> NumberValidator:
    return get_validators().check_if_number(value, name)


def check_if_string(value: str | None, name: str) -> StringValidator:
    return get_validators().check_if_string(value, name)


def check_if_list(value: Any, name: str) -> ListValidator:
    return get_validators().check_if_list(value, name)


def check_if_set(value: Any, name: str) -> SetValidator:
    return get_validators().check_if_set(value, name)


def check_if_map(value: Mapping[Any, Any] | None, name: str) -> MapValidator:
    return get_validators().check_if_map(value, name)


def assert_that(validation: Callable[[Validators], Any]) -> None:
    """Run ``validation`` only if ``get_global_configuration().assertions_enabled`` is set."""
    get_validators().assert_that(validation)


def assert_that_and_return(validation: Callable[[Validators], R]) -> R | None:
    return get_validators().assert_that_and_return(validation)


def configuration() -> Configuration:
    return get_validators().configuration()


def update_configuration() -> ConfigurationUpdater:
    return get_validators().update_configuration()


def with_context(value: Any, name: str) -> Validators:
    """Include ``name: value`` in the failure messages of every validator created from now on."""
    return get_validators().with_context(value, name)


def remove_context(name: str) -> Validators:
    return get_validators().remove_context(name)
