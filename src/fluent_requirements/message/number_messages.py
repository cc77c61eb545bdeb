"""Messages for numeric constraints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, message_with_value, quote_name

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol


def _must_be(validator: ValidatorProtocol[Any], requirement: str) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} {requirement}.")


def number_is_negative(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "must be negative")


def number_is_not_negative(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "may not be negative")


def number_is_zero(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "must be zero")


def number_is_not_zero(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "may not be zero")


def number_is_positive(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "must be positive")


def number_is_not_positive(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "may not be positive")


def number_is_whole_number(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "must be a whole number")


def number_is_not_whole_number(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "may not be a whole number")


def number_is_finite(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "must be finite")


def number_is_infinite(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "must be infinite")


def number_is_number(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "must be a number")


def number_is_not_number(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _must_be(validator, "may not be a number")


def number_comparison(
    validator: ValidatorProtocol[Any],
    relationship: str,
    limit_name: str | None,
    limit: Any,
) -> MessageBuilder:
    """Describe a value that fails a comparison against a limit.

    Args:
        validator: The validator that failed.
        relationship: The comparison, for example "must be greater than".
        limit_name: The name of the limit, or None to spell out its value.
        limit: The limit.

    Example:
        "actual" must be greater than 10.
        actual: 5
    """
    name = validator.get_name()
    if limit_name is None:
        limit_as_string = validator.get_configuration().to_string(limit)
        return message_with_value(validator, f"{quote_name(name)} {relationship} {limit_as_string}.")
    builder = message_with_value(validator, f"{quote_name(name)} {relationship} {quote_name(limit_name)}.")
    return builder.with_context(limit, limit_name)


def number_is_between(
    validator: ValidatorProtocol[Any],
    start: Any,
    start_inclusive: bool,
    end: Any,
    end_inclusive: bool,
) -> MessageBuilder:
    configuration = validator.get_configuration()
    opening = "[" if start_inclusive else "("
    closing = "]" if end_inclusive else ")"
    bounds = f"{opening}{configuration.to_string(start)}, {configuration.to_string(end)}{closing}"
    return _must_be(validator, f"must be in range {bounds}")


def number_is_multiple_of(validator: ValidatorProtocol[Any], factor_name: str | None, factor: Any) -> MessageBuilder:
    return number_comparison(validator, "must be a multiple of", factor_name, factor)


def number_is_not_multiple_of(
    validator: ValidatorProtocol[Any], factor_name: str | None, factor: Any
) -> MessageBuilder:
    return number_comparison(validator, "may not be a multiple of", factor_name, factor)
