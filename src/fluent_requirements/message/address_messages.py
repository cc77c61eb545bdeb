"""Messages for constraints on network addresses and URIs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, message_with_value, quote_name

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol


def string_is_inet_address(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    name = validator.get_name()
    return message_with_value(validator, f"{quote_name(name)} must be an IP address or hostname.")


def inet_address_is_ip_v4(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} must be an IPv4 address.")


def inet_address_is_ip_v6(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} must be an IPv6 address.")


def inet_address_is_hostname(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} must be a hostname.")


def string_is_uri(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} must be a valid URI.")


def uri_is_absolute(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    """Describe a URI that has no scheme.

    Example:
        "endpoint" must be an absolute URI.
        endpoint: "/api/v1"
    """
    return message_with_value(validator, f"{quote_name(validator.get_name())} must be an absolute URI.")


def uri_is_relative(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} must be a relative URI.")
