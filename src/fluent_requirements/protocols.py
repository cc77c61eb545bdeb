"""Validator protocol for type checking.

The message functions only need a few read-only accessors of a validator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from fluent_requirements.configuration import Configuration
    from fluent_requirements.target import ValidationTarget

T = TypeVar("T", covariant=True)


@runtime_checkable
class ValidatorProtocol(Protocol[T]):
    """Read-only view of a validator.

    Use this for type hints when accepting any validator.
    Generic over T, the type of the value being validated.
    """

    def get_name(self) -> str:
        """Name of the value."""
        ...

    def get_target(self) -> ValidationTarget[T]:
        """The value, or the invalid target if it is unavailable."""
        ...

    def get_context(self) -> dict[str, Any]:
        """Contextual information to include in failure messages."""
        ...

    def get_configuration(self) -> Configuration:
        """The configuration of the validator."""
        ...
