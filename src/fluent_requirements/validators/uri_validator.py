"""Validator for URIs."""

from __future__ import annotations

import re
from typing import Callable
from urllib.parse import SplitResult, urlsplit

from fluent_requirements.message import address_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.validators.base import AbstractValidator

__all__ = ["UriValidator", "is_uri", "parse_uri"]

_WHITESPACE_OR_CONTROL = re.compile(r"[\s\x00-\x1f\x7f]")


def parse_uri(value: str) -> SplitResult | None:
    """Split a URI reference into its components.

    Returns:
        The components, or None if ``value`` is empty, contains whitespace or
        control characters, has an unbalanced IPv6 host or a port that is not
        a number between 0 and 65535.
    """
    if not value or _WHITESPACE_OR_CONTROL.search(value):
        return None
    try:
        components = urlsplit(value)
        # Raises ValueError for an invalid port
        components.port
    except ValueError:
        return None
    return components


def is_uri(value: str) -> bool:
    return parse_uri(value) is not None


class UriValidator(AbstractValidator[str]):
    """Validates a URI reference such as ``https://example.com/a`` or ``../b``.

    A URI is absolute if it has a scheme.

    Example:
        require_that(endpoint, "endpoint").as_uri().is_absolute()
    """

    def _check(self, predicate: Callable[[SplitResult], bool], message: Callable[[], MessageBuilder]) -> UriValidator:
        # Values that are not URIs were rejected by as_uri()
        parsed = self._value.map(lambda value: None if value is None else parse_uri(value))
        if parsed.none_to_invalid().validation_failed(predicate):
            self._fail_on_none()
            self._add_value_error(message())
        return self

    def is_absolute(self) -> UriValidator:
        return self._check(lambda components: bool(components.scheme), lambda: address_messages.uri_is_absolute(self))

    def is_relative(self) -> UriValidator:
        return self._check(lambda components: not components.scheme, lambda: address_messages.uri_is_relative(self))

    def get_components(self) -> SplitResult:
        """Get the scheme, network location, path, query and fragment of the URI.

        Raises:
            IllegalStateError: If the value is unavailable because a validation failed.
        """
        return urlsplit(self.get_value())
