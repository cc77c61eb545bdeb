"""Messages for constraints on the size of a collection.

The messages describe the collection ("must contain at least 3 elements")
rather than the number being validated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, quote_name

if TYPE_CHECKING:
    from fluent_requirements.pluralizer import Pluralizer
    from fluent_requirements.protocols import ValidatorProtocol


def _with_collection(
    validator: ValidatorProtocol[Any],
    collection_name: str,
    collection: Any,
    message: str,
) -> MessageBuilder:
    builder = MessageBuilder(validator, message).with_context(collection, collection_name)
    target = validator.get_target()
    if target.is_valid():
        builder.with_context(target.or_else(None), validator.get_name())
    return builder


def size_comparison(
    validator: ValidatorProtocol[Any],
    collection_name: str,
    collection: Any,
    relationship: str,
    limit_name: str | None,
    limit: Any,
    pluralizer: Pluralizer,
) -> MessageBuilder:
    """Describe a collection whose size fails a comparison against a limit.

    Example:
        "actual" must contain at least 3 elements.
        actual         : [1, 2]
        actual.length(): 2
    """
    if limit_name is None:
        limit_as_string = validator.get_configuration().to_string(limit)
    else:
        limit_as_string = quote_name(limit_name)
    message = f"{quote_name(collection_name)} {relationship} {limit_as_string} {pluralizer.name_of(limit)}."
    builder = _with_collection(validator, collection_name, collection, message)
    if limit_name is not None:
        builder.with_context(limit, limit_name)
    return builder


def size_is_between(
    validator: ValidatorProtocol[Any],
    collection_name: str,
    collection: Any,
    start: Any,
    start_inclusive: bool,
    end: Any,
    end_inclusive: bool,
    pluralizer: Pluralizer,
) -> MessageBuilder:
    configuration = validator.get_configuration()
    opening = "[" if start_inclusive else "("
    closing = "]" if end_inclusive else ")"
    bounds = f"{opening}{configuration.to_string(start)}, {configuration.to_string(end)}{closing}"
    message = f"{quote_name(collection_name)} must contain {bounds} {pluralizer.name_of(end)}."
    return _with_collection(validator, collection_name, collection, message)


def size_is_empty(validator: ValidatorProtocol[Any], collection_name: str, collection: Any) -> MessageBuilder:
    return _with_collection(validator, collection_name, collection, f"{quote_name(collection_name)} must be empty.")


def size_is_not_empty(validator: ValidatorProtocol[Any], collection_name: str, collection: Any) -> MessageBuilder:
    return MessageBuilder(validator, f"{quote_name(collection_name)} may not be empty.")
