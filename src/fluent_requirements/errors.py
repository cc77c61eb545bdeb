"""Exception types raised by the library.

Validation failures use the built-in ``ValueError``, ``TypeError`` and
``AssertionError``. The classes below cover the cases that have no built-in
counterpart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fluent_requirements.failures import ValidationFailure

__all__ = ["IllegalStateError", "MultipleFailuresError"]


class IllegalStateError(RuntimeError):
    """Raised when an object is used in a state that does not permit the operation.

    Example:
        updater = validators.update_configuration()
        updater.close()
        updater.allow_diff(False)  # raises IllegalStateError
    """


class MultipleFailuresError(Exception):
    """Aggregates more than one validation failure into a single exception.

    Attributes:
        failures: The failures, in the order they were recorded.
    """

    def __init__(self, failures: Sequence[ValidationFailure]) -> None:
        """Initialize the error.

        Args:
            failures: The failures to aggregate. Must contain at least two entries.

        Raises:
            ValueError: If fewer than two failures are provided.
        """
        if len(failures) < 2:
            raise ValueError(f"failures must contain at least 2 elements.\nactual: {len(failures)}")
        self.failures: tuple[ValidationFailure, ...] = tuple(failures)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        sections = [f"{len(self.failures)} validation failures"]
        for index, failure in enumerate(self.failures, start=1):
            sections.append(f"{index}. {failure.get_message()}")
        return "\n\n".join(sections)

    def get_failures(self) -> tuple[ValidationFailure, ...]:
        """Get the aggregated failures."""
        return self.failures
