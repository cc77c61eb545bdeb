"""Failure message construction.

The ``*_messages`` modules hold one function per constraint. Each returns a
``MessageBuilder`` describing why a value failed that constraint.
"""

from fluent_requirements.message.builder import MessageBuilder, message_with_value, quote_name
from fluent_requirements.message.sections import ContextSection, DiffSection, MessageSection, StringSection

__all__ = [
    "ContextSection",
    "DiffSection",
    "MessageBuilder",
    "MessageSection",
    "StringSection",
    "message_with_value",
    "quote_name",
]
