"""Messages for boolean constraints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, quote_name

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol


def boolean_is_true(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return MessageBuilder(validator, f"{quote_name(validator.get_name())} must be true.")


def boolean_is_false(validator: ValidatorProtocol[Any]) -> MessageBuilder:
    return MessageBuilder(validator, f"{quote_name(validator.get_name())} must be false.")
