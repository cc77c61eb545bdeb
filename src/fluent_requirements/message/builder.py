"""Assembles the text of a failure message."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.diff.context import ContextGenerator, ContextLine
from fluent_requirements.message.sections import ContextSection, DiffSection, MessageSection, StringSection

if TYPE_CHECKING:
    from fluent_requirements.protocols import ValidatorProtocol

__all__ = ["MessageBuilder", "message_with_value", "quote_name"]


def quote_name(name: str) -> str:
    """Quote the name of a value for use in a message.

    Names that contain a ``.`` refer to a method chain such as ``actual.length()``
    and are left bare.

    Example:
        quote_name("actual")           # '"actual"'
        quote_name("actual.length()")  # 'actual.length()'
    """
    if "." in name:
        return name
    return f'"{name}"'


class MessageBuilder:
    """Builds the message of a validation failure.

    The rendered message consists of the message sentence, the context
    lines, and an optional diff followed by its legend::

        "actual" must be equal to "expected".
        actual  : 5
        expected: 6

    Context staged on the builder takes precedence over the validator's
    context when both use the same name.

    Example:
        message = (
            MessageBuilder(validator, f"{quote_name(name)} must be positive.")
            .with_context(value, name)
            .to_string()
        )
    """

    def __init__(self, validator: ValidatorProtocol[Any], message: str) -> None:
        """Initialize the builder.

        Args:
            validator: The validator whose context and configuration apply.
            message: The sentence describing the failure. Must end with a period.

        Raises:
            ValueError: If ``message`` does not end with a period.
        """
        if not message.endswith("."):
            raise ValueError(f'message must end with ".".\nactual: {message!r}')
        self._validator = validator
        self._message = message
        self._failure_context: dict[str, Any] = {}
        self._diff: list[ContextLine] = []
        self._legend: list[str] = []

    @staticmethod
    def quote_name(name: str) -> str:
        return quote_name(name)

    def with_context(self, value: Any, name: str) -> MessageBuilder:
        """Add a ``name: value`` line. A later value for the same name replaces the earlier one.

        Returns:
            Self for method chaining.
        """
        self._failure_context[name] = value
        return self

    def add_diff(
        self,
        actual_name: str,
        actual_value: Any,
        expected_name: str,
        expected_value: Any,
        *,
        expected_in_message: bool = False,
    ) -> MessageBuilder:
        """Describe how the actual value differs from the expected value.

        Values that are long enough, or span multiple lines, are diffed.
        Otherwise both are added as context lines.

        Args:
            actual_name: The name of the actual value.
            actual_value: The actual value.
            expected_name: The name of the expected value.
            expected_value: The expected value.
            expected_in_message: True if the message sentence already shows the
                expected value, in which case it is not repeated as context.

        Returns:
            Self for method chaining.
        """
        generator = ContextGenerator(self._validator.get_configuration())
        if generator.should_diff(actual_value, expected_value):
            self._diff.extend(generator.get_diff(actual_name, actual_value, expected_name, expected_value))
            self._legend = generator.get_legend()
            return self
        self.with_context(actual_value, actual_name)
        if not expected_in_message:
            self.with_context(expected_value, expected_name)
        return self

    def _get_sections(self) -> list[MessageSection]:
        context = dict(self._failure_context)
        for name, value in self._validator.get_context().items():
            context.setdefault(name, value)
        sections: list[MessageSection] = []
        if context:
            sections.append(ContextSection(self._validator.get_configuration(), context))
        if self._diff:
            sections.append(DiffSection(self._diff))
            sections.append(StringSection(["", *self._legend]))
        return sections

    def to_string(self) -> str:
        """Render the message."""
        sections = self._get_sections()
        message = self._message
        if not sections and "\n" not in message and "," not in message:
            message = message[:-1]
        key_width = max((section.get_max_key_length() for section in sections), default=0)
        lines = [message]
        for section in sections:
            lines.extend(section.get_lines(key_width))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()


def message_with_value(validator: ValidatorProtocol[Any], message: str) -> MessageBuilder:
    """Return a builder that shows the validator's value, if it has one."""
    builder = MessageBuilder(validator, message)
    target = validator.get_target()
    if target.is_valid():
        builder.with_context(target.or_else(None), validator.get_name())
    return builder
