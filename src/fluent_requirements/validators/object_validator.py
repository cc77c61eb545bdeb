"""Validator for values of any type."""

from __future__ import annotations

import ipaddress
import numbers
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from fluent_requirements.message import class_messages, object_messages
from fluent_requirements.target import ValidationTarget
from fluent_requirements.validators.base import AbstractValidator
from fluent_requirements.validators.boolean_validator import BooleanValidator
from fluent_requirements.validators.class_validator import ClassValidator
from fluent_requirements.validators.collection_validator import ListValidator, SetValidator
from fluent_requirements.validators.inet_address_validator import InetAddressValidator
from fluent_requirements.validators.map_validator import MapValidator
from fluent_requirements.validators.number_validator import NumberValidator
from fluent_requirements.validators.string_validator import StringValidator
from fluent_requirements.validators.uri_validator import UriValidator

__all__ = ["ObjectValidator"]

V = TypeVar("V", bound=AbstractValidator[Any])


class ObjectValidator(AbstractValidator[Any]):
    """Validates a value of any type.

    The ``as_*`` methods continue the chain with a type-specific validator.
    If the value has the wrong type, a ``TypeError`` failure is recorded and
    the new validator's value is unavailable. A None value is passed through
    unchanged, so that the next predicate reports it.

    Example:
        require_that(config["port"], "port").as_number().is_between(1, 65536)
    """

    def _narrow(self, validator_class: Callable[..., V], expected: type | tuple[type, ...]) -> V:
        value = self._value
        if value.is_valid() and not value.is_none() and not isinstance(value.or_else(None), expected):
            self._add_type_error(object_messages.object_is_instance_of(self, expected))
            value = ValidationTarget.invalid()
        return self._derive(validator_class, self._name, value)

    def as_string(self) -> StringValidator:
        """Validate the value's ``str()`` form. None is passed through unchanged."""
        value = self._value.map(lambda value: None if value is None else str(value))
        return self._derive(StringValidator, self._name, value)

    def as_number(self) -> NumberValidator:
        return self._narrow(NumberValidator, numbers.Real)

    def as_boolean(self) -> BooleanValidator:
        return self._narrow(BooleanValidator, bool)

    def as_list(self) -> ListValidator:
        return self._narrow(ListValidator, (list, tuple))

    def as_set(self) -> SetValidator:
        return self._narrow(SetValidator, (set, frozenset))

    def as_map(self) -> MapValidator:
        return self._narrow(MapValidator, Mapping)

    def as_class(self) -> ClassValidator:
        """Validate the value as a class. Other values record a ``TypeError`` failure."""
        value = self._value
        if value.is_valid() and not value.is_none() and not isinstance(value.or_else(None), type):
            self._add_type_error(class_messages.object_is_class(self))
            value = ValidationTarget.invalid()
        return self._derive(ClassValidator, self._name, value)

    def as_inet_address(self) -> InetAddressValidator:
        """Validate the value as an IP address or hostname.

        Accepts a ``str`` or an ``ipaddress.IPv4Address``/``IPv6Address``.
        """
        if isinstance(self._value.or_else(None), (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return self.as_string().as_inet_address()
        return self._narrow(StringValidator, str).as_inet_address()

    def as_uri(self) -> UriValidator:
        """Validate the value as a URI reference. The value must be a ``str``."""
        return self._narrow(StringValidator, str).as_uri()
