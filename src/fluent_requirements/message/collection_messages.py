"""Messages for constraints on the elements of lists, sets and mappings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, message_with_value, quote_name

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol


def _operand_message(
    validator: ValidatorProtocol[Any],
    requirement: str,
    named_requirement: str,
    operand_name: str | None,
    operand: Any,
) -> MessageBuilder:
    """Spell out ``operand`` in the sentence, or refer to it by name and show it as context."""
    name = quote_name(validator.get_name())
    if operand_name is None:
        operand_as_string = validator.get_configuration().to_string(operand)
        return message_with_value(validator, f"{name} {requirement} {operand_as_string}.")
    builder = message_with_value(validator, f"{name} {named_requirement} {quote_name(operand_name)}.")
    return builder.with_context(operand, operand_name)


def collection_is_empty(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    name = validator.get_name()
    builder = message_with_value(validator, f"{quote_name(name)} must be empty.")
    value = validator.get_target().or_else(None)
    if value is not None:
        builder.with_context(len(value), f"{name}.size()")
    return builder


def collection_is_not_empty(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return MessageBuilder(validator, f"{quote_name(validator.get_name())} may not be empty.")


def collection_contains(validator: ValidatorProtocol[Any], element_name: str | None, element: Any) -> MessageBuilder:
    return _operand_message(validator, "must contain", "must contain", element_name, element)


def collection_does_not_contain(
    validator: ValidatorProtocol[Any], element_name: str | None, element: Any
) -> MessageBuilder:
    return _operand_message(validator, "may not contain", "may not contain", element_name, element)


def collection_contains_exactly(
    validator: ValidatorProtocol[Any],
    only_in_actual: Sequence[Any],
    only_in_expected: Sequence[Any],
    expected_name: str | None,
    expected: Any,
) -> MessageBuilder:
    """Describe a collection whose elements differ from the expected elements.

    Example:
        "actual" must contain exactly [1, 2, 3].
        actual  : [1, 2, 4]
        missing : [3]
        unwanted: [4]
    """
    builder = _operand_message(
        validator,
        "must contain exactly",
        "must contain exactly the same elements as",
        expected_name,
        expected,
    )
    return builder.with_context(list(only_in_expected), "missing").with_context(list(only_in_actual), "unwanted")


def collection_does_not_contain_exactly(
    validator: ValidatorProtocol[Any], unwanted_name: str | None, unwanted: Any
) -> MessageBuilder:
    return _operand_message(
        validator,
        "may not contain exactly",
        "may not contain exactly the same elements as",
        unwanted_name,
        unwanted,
    )


def collection_contains_any(validator: ValidatorProtocol[Any], expected_name: str | None, expected: Any) -> MessageBuilder:
    return _operand_message(
        validator, "must contain any of", "must contain any of the elements in", expected_name, expected
    )


def collection_does_not_contain_any(
    validator: ValidatorProtocol[Any],
    common: Sequence[Any],
    unwanted_name: str | None,
    unwanted: Any,
) -> MessageBuilder:
    builder = _operand_message(
        validator, "may not contain any of", "may not contain any of the elements in", unwanted_name, unwanted
    )
    return builder.with_context(list(common), "unwanted")


def collection_contains_all(
    validator: ValidatorProtocol[Any],
    only_in_expected: Sequence[Any],
    expected_name: str | None,
    expected: Any,
) -> MessageBuilder:
    builder = _operand_message(
        validator, "must contain all of", "must contain all the elements in", expected_name, expected
    )
    return builder.with_context(list(only_in_expected), "missing")


def collection_does_not_contain_all(
    validator: ValidatorProtocol[Any], unwanted_name: str | None, unwanted: Any
) -> MessageBuilder:
    return _operand_message(
        validator, "may not contain all of", "may not contain all the elements in", unwanted_name, unwanted
    )


def collection_does_not_contain_duplicates(
    validator: ValidatorProtocol[Any], duplicates: Sequence[Any]
) -> MessageBuilder:
    builder = message_with_value(validator, f"{quote_name(validator.get_name())} may not contain duplicate elements.")
    return builder.with_context(list(duplicates), "duplicates")


def collection_is_sorted(validator: ValidatorProtocol[Any], expected: list[Any] | None) -> MessageBuilder:
    """Describe an unsorted list. ``expected`` is None if the elements cannot be compared."""
    name = validator.get_name()
    if expected is None:
        return message_with_value(validator, f"{quote_name(name)} must be sorted.")
    builder = MessageBuilder(validator, f"{quote_name(name)} must be sorted.")
    return builder.add_diff(name, validator.get_target().or_else(None), "expected", expected)


def map_contains_key(validator: ValidatorProtocol[Any], key_name: str | None, key: Any) -> MessageBuilder:
    return _operand_message(validator, "must contain the key", "must contain the key", key_name, key)


def map_does_not_contain_key(validator: ValidatorProtocol[Any], key_name: str | None, key: Any) -> MessageBuilder:
    return _operand_message(validator, "may not contain the key", "may not contain the key", key_name, key)
