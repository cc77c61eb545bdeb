"""Messages for constraints on classes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, message_with_value, quote_name
from fluent_requirements.type_info import Type

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol


def object_is_class(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    """Describe a value that was expected to be a class."""
    name = validator.get_name()
    builder = message_with_value(validator, f"{quote_name(name)} must be a class.")
    target = validator.get_target()
    if target.is_valid():
        builder.with_context(Type.of(target.or_else(None)), f"{name}.type")
    return builder


def class_is_supertype_of(validator: ValidatorProtocol[Any], subtype: type) -> MessageBuilder:
    name = validator.get_name()
    return message_with_value(validator, f"{quote_name(name)} must be a supertype of {subtype.__qualname__}.")


def class_is_subtype_of(validator: ValidatorProtocol[Any], supertype: type) -> MessageBuilder:
    name = validator.get_name()
    return message_with_value(validator, f"{quote_name(name)} must be a subtype of {supertype.__qualname__}.")
