"""Messages for constraints that apply to values of any type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, message_with_value, quote_name
from fluent_requirements.type_info import Type

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol


def object_is_none(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return message_with_value(validator, f"{quote_name(validator.get_name())} must be None.")


def object_is_not_none(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    # The value is known to be None, so it is not repeated
    return MessageBuilder(validator, f"{quote_name(validator.get_name())} may not be None.")


def object_is_equal_to(validator: ValidatorProtocol[Any], expected_name: str | None, expected: Any) -> MessageBuilder:
    """Describe a value that differs from the expected value.

    Without ``expected_name``, the expected value is spelled out in the
    sentence unless it would not fit on one line of the terminal.
    """
    name = validator.get_name()
    configuration = validator.get_configuration()
    actual = validator.get_target().or_else(None)
    if expected_name is not None:
        builder = MessageBuilder(validator, f"{quote_name(name)} must be equal to {quote_name(expected_name)}.")
        return builder.add_diff(name, actual, expected_name, expected)

    expected_as_string = configuration.to_string(expected)
    message = f"{quote_name(name)} must be equal to {expected_as_string}."
    if len(message) < configuration.terminal_width and "\n" not in expected_as_string:
        builder = MessageBuilder(validator, message)
        return builder.add_diff(name, actual, "expected", expected, expected_in_message=True)
    builder = MessageBuilder(validator, f"{quote_name(name)} had an unexpected value.")
    return builder.add_diff(name, actual, "expected", expected)


def object_is_not_equal_to(validator: ValidatorProtocol[Any], unwanted_name: str | None, unwanted: Any) -> MessageBuilder:
    name = validator.get_name()
    if unwanted_name is None:
        unwanted_as_string = validator.get_configuration().to_string(unwanted)
        return MessageBuilder(validator, f"{quote_name(name)} may not be equal to {unwanted_as_string}.")
    return message_with_value(
        validator, f"{quote_name(name)} may not be equal to {quote_name(unwanted_name)}."
    )


def object_is_same_reference_as(validator: ValidatorProtocol[Any], expected_name: str, expected: Any) -> MessageBuilder:
    name = validator.get_name()
    builder = message_with_value(
        validator, f"{quote_name(name)} must be the same object as {quote_name(expected_name)}."
    )
    return builder.with_context(expected, expected_name)


def object_is_not_same_reference_as(
    validator: ValidatorProtocol[Any], unwanted_name: str, unwanted: Any
) -> MessageBuilder:
    name = validator.get_name()
    return message_with_value(
        validator, f"{quote_name(name)} may not be the same object as {quote_name(unwanted_name)}."
    )


def _type_names(types: type | tuple[type, ...]) -> str:
    if isinstance(types, type):
        return types.__qualname__
    return " | ".join(_type_names(klass) for klass in types)


def object_is_instance_of(validator: ValidatorProtocol[Any], expected: type | tuple[type, ...]) -> MessageBuilder:
    """Describe a value that is not an instance of the expected type."""
    name = validator.get_name()
    builder = message_with_value(
        validator, f"{quote_name(name)} must be an instance of {_type_names(expected)}."
    )
    target = validator.get_target()
    if target.is_valid():
        builder.with_context(Type.of(target.or_else(None)), f"{name}.type")
    return builder


def object_is_not_instance_of(validator: ValidatorProtocol[Any], unwanted: type | tuple[type, ...]) -> MessageBuilder:
    name = validator.get_name()
    builder = message_with_value(
        validator, f"{quote_name(name)} may not be an instance of {_type_names(unwanted)}."
    )
    target = validator.get_target()
    if target.is_valid():
        builder.with_context(Type.of(target.or_else(None)), f"{name}.type")
    return builder
