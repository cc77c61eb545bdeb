"""Validator for IP addresses and hostnames."""

from __future__ import annotations

import ipaddress
import re
from typing import Callable

from fluent_requirements.message import address_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.validators.base import AbstractValidator

__all__ = ["InetAddressValidator", "ip_version", "is_hostname", "is_inet_address"]

_LABEL = re.compile(r"[a-zA-Z0-9-]{1,63}")
_TOP_LEVEL_DOMAIN = re.compile(r"[a-zA-Z-]+")

# Each label is preceded by a length byte and the name ends with a zero byte
_MAX_ENCODED_HOSTNAME_LENGTH = 255


def ip_version(value: str) -> int | None:
    """Return 4 or 6 if ``value`` is an IP address of that version, otherwise None."""
    try:
        return ipaddress.ip_address(value).version
    except ValueError:
        return None


def is_hostname(value: str) -> bool:
    """Check if ``value`` is a hostname as described by RFC 1123 and RFC 3696.

    Labels contain letters, digits and hyphens, do not begin or end with a
    hyphen and are at most 63 characters long. The top-level domain may not be
    all-numeric.
    """
    labels = value.split(".")
    if not _TOP_LEVEL_DOMAIN.fullmatch(labels[-1]):
        return False
    encoded_length = 1
    for label in labels:
        if not _LABEL.fullmatch(label) or label.startswith("-") or label.endswith("-"):
            return False
        encoded_length += 1 + len(label)
    return encoded_length <= _MAX_ENCODED_HOSTNAME_LENGTH


def is_inet_address(value: str) -> bool:
    return ip_version(value) is not None or is_hostname(value)


class InetAddressValidator(AbstractValidator[str]):
    """Validates the string form of an IP address or hostname.

    Example:
        require_that(host, "host").as_inet_address().is_ip_v4()
    """

    def _check(self, predicate: Callable[[str], bool], message: Callable[[], MessageBuilder]) -> InetAddressValidator:
        if self._value.none_to_invalid().validation_failed(predicate):
            self._fail_on_none()
            self._add_value_error(message())
        return self

    def is_ip_v4(self) -> InetAddressValidator:
        return self._check(lambda value: ip_version(value) == 4, lambda: address_messages.inet_address_is_ip_v4(self))

    def is_ip_v6(self) -> InetAddressValidator:
        return self._check(lambda value: ip_version(value) == 6, lambda: address_messages.inet_address_is_ip_v6(self))

    def is_hostname(self) -> InetAddressValidator:
        """Ensure that the value is a hostname rather than an IP address."""
        return self._check(is_hostname, lambda: address_messages.inet_address_is_hostname(self))
