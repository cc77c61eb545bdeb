"""Validator for strings."""

from __future__ import annotations

import re
from typing import Any, Callable, TypeVar

from fluent_requirements.message import address_messages, string_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.pluralizer import Pluralizer
from fluent_requirements.target import ValidationTarget
from fluent_requirements.validators.base import AbstractValidator
from fluent_requirements.validators.inet_address_validator import InetAddressValidator, is_inet_address
from fluent_requirements.validators.size_validator import SizeValidator
from fluent_requirements.validators.uri_validator import UriValidator, is_uri

__all__ = ["StringValidator"]

V = TypeVar("V", bound=AbstractValidator[Any])

_WHITESPACE = re.compile(r"\s")


class StringValidator(AbstractValidator[str]):
    """Validates a ``str``.

    Example:
        require_that(username, "username").is_not_blank().does_not_contain_whitespace()
        require_that(code, "code").length().is_between_closed(4, 8)
    """

    def _check(self, predicate: Callable[[str], bool], message: Callable[[], MessageBuilder]) -> StringValidator:
        if self._value.none_to_invalid().validation_failed(predicate):
            self._fail_on_none()
            self._add_value_error(message())
        return self

    def is_empty(self) -> StringValidator:
        return self._check(lambda value: value == "", lambda: string_messages.string_is_empty(self))

    def is_not_empty(self) -> StringValidator:
        return self._check(lambda value: value != "", lambda: string_messages.string_is_not_empty(self))

    def is_blank(self) -> StringValidator:
        """Ensure that the value is empty or contains only whitespace."""
        return self._check(lambda value: value.strip() == "", lambda: string_messages.string_is_blank(self))

    def is_not_blank(self) -> StringValidator:
        return self._check(lambda value: value.strip() != "", lambda: string_messages.string_is_not_blank(self))

    def is_trimmed(self) -> StringValidator:
        """Ensure that the value does not begin or end with whitespace."""
        return self._check(lambda value: value == value.strip(), lambda: string_messages.string_is_trimmed(self))

    def does_not_contain_whitespace(self) -> StringValidator:
        return self._check(
            lambda value: _WHITESPACE.search(value) is None,
            lambda: string_messages.string_does_not_contain_whitespace(self),
        )

    def starts_with(self, prefix: str) -> StringValidator:
        return self._check(
            lambda value: value.startswith(prefix),
            lambda: string_messages.string_starts_with(self, prefix),
        )

    def does_not_start_with(self, prefix: str) -> StringValidator:
        return self._check(
            lambda value: not value.startswith(prefix),
            lambda: string_messages.string_does_not_start_with(self, prefix),
        )

    def ends_with(self, suffix: str) -> StringValidator:
        return self._check(
            lambda value: value.endswith(suffix),
            lambda: string_messages.string_ends_with(self, suffix),
        )

    def does_not_end_with(self, suffix: str) -> StringValidator:
        return self._check(
            lambda value: not value.endswith(suffix),
            lambda: string_messages.string_does_not_end_with(self, suffix),
        )

    def contains(self, expected: str) -> StringValidator:
        return self._check(lambda value: expected in value, lambda: string_messages.string_contains(self, expected))

    def does_not_contain(self, unwanted: str) -> StringValidator:
        return self._check(
            lambda value: unwanted not in value,
            lambda: string_messages.string_does_not_contain(self, unwanted),
        )

    def matches(self, pattern: str | re.Pattern[str]) -> StringValidator:
        """Ensure that the whole value matches a regular expression.

        Args:
            pattern: The regular expression.

        Returns:
            Self for method chaining.
        """
        compiled = re.compile(pattern)
        return self._check(
            lambda value: compiled.fullmatch(value) is not None,
            lambda: string_messages.string_matches(self, compiled.pattern),
        )

    def length(self) -> SizeValidator:
        """Validate the number of characters in the value."""
        return self._derive_from_non_none(
            SizeValidator, f"{self._name}.length()", len, self._name, self._value, Pluralizer.CHARACTER
        )

    def trim(self) -> StringValidator:
        """Validate the value with leading and trailing whitespace removed."""
        return self._derive_from_non_none(StringValidator, f"{self._name}.trim()", str.strip)

    def _convert(
        self,
        validator_class: Callable[..., V],
        predicate: Callable[[str], bool],
        message: Callable[[], MessageBuilder],
    ) -> V:
        value = self._value
        if value.is_valid() and not value.is_none() and not predicate(value.or_else("")):
            self._add_value_error(message())
            value = ValidationTarget.invalid()
        return self._derive(validator_class, self._name, value)

    def as_inet_address(self) -> InetAddressValidator:
        """Validate the value as an IP address or hostname.

        If the value is neither, a ``ValueError`` failure is recorded and the new
        validator's value is unavailable.
        """
        return self._convert(
            InetAddressValidator, is_inet_address, lambda: address_messages.string_is_inet_address(self)
        )

    def as_uri(self) -> UriValidator:
        """Validate the value as a URI reference.

        If the value is not a URI, a ``ValueError`` failure is recorded and the
        new validator's value is unavailable.
        """
        return self._convert(UriValidator, is_uri, lambda: address_messages.string_is_uri(self))
