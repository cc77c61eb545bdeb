"""Messages for string constraints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, message_with_value, quote_name

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol


def _requirement(validator: ValidatorProtocol[Any], requirement: str) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} {requirement}.")


def _with_operand(validator: ValidatorProtocol[Any], requirement: str, operand: str) -> MessageBuilder:
    operand_as_string = validator.get_configuration().to_string(operand)
    return _requirement(validator, f"{requirement} {operand_as_string}")


def string_is_empty(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _requirement(validator, "must be empty")


def string_is_not_empty(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return MessageBuilder(validator, f"{quote_name(validator.get_name())} may not be empty.")


def string_is_blank(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _requirement(validator, "must be blank")


def string_is_not_blank(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _requirement(validator, "may not be blank")


def string_is_trimmed(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _requirement(validator, "may not contain leading or trailing whitespace")


def string_does_not_contain_whitespace(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return _requirement(validator, "may not contain whitespace")


def string_starts_with(validator: ValidatorProtocol[Any], prefix: str) -> MessageBuilder:
    return _with_operand(validator, "must start with", prefix)


def string_does_not_start_with(validator: ValidatorProtocol[Any], prefix: str) -> MessageBuilder:
    return _with_operand(validator, "may not start with", prefix)


def string_ends_with(validator: ValidatorProtocol[Any], suffix: str) -> MessageBuilder:
    return _with_operand(validator, "must end with", suffix)


def string_does_not_end_with(validator: ValidatorProtocol[Any], suffix: str) -> MessageBuilder:
    return _with_operand(validator, "may not end with", suffix)


def string_contains(validator: ValidatorProtocol[Any], expected: str) -> MessageBuilder:
    return _with_operand(validator, "must contain", expected)


def string_does_not_contain(validator: ValidatorProtocol[Any], unwanted: str) -> MessageBuilder:
    return _with_operand(validator, "may not contain", unwanted)


def string_matches(validator: ValidatorProtocol[Any], pattern: str) -> MessageBuilder:
    return _with_operand(validator, "must match the regular expression", pattern)
