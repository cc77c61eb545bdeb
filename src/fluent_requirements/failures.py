"""Validation failure containers.

A ``ValidationFailure`` records why a value was rejected. ``ValidationFailures``
aggregates the failures of a validation chain into a single error.
"""

from __future__ import annotations

import os
import traceback
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Callable, overload

from fluent_requirements.errors import MultipleFailuresError

if TYPE_CHECKING:
    from fluent_requirements.configuration import Configuration

__all__ = ["ErrorBuilder", "ValidationFailure", "ValidationFailures"]

ErrorBuilder = Callable[[str], BaseException]

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _caller_stack() -> traceback.StackSummary:
    """Capture the current stack, excluding frames inside this package."""
    frames = [frame for frame in traceback.extract_stack() if not frame.filename.startswith(_PACKAGE_DIR)]
    return traceback.StackSummary.from_list(frames)


class ValidationFailure:
    """A single validation failure.

    The error is built from the message by ``error_builder`` and then passed
    through the configuration's error transformer, exactly once. If the
    configuration records stack traces, this happens as soon as the failure
    is created and the caller's stack is kept in ``stack``; otherwise it is
    deferred to the first ``get_error()`` call.

    Attributes:
        stack: The stack of the code that recorded the failure, or None if
            stack traces are not recorded.
    """

    def __init__(self, configuration: Configuration, error_builder: ErrorBuilder, message: str) -> None:
        """Initialize the failure.

        Args:
            configuration: The configuration of the validator that failed.
            error_builder: Creates the error from the message, for example ``ValueError``.
            message: The failure message.
        """
        self._message = message
        self._error_builder = error_builder
        self._error_transformer = configuration.error_transformer
        self._error: BaseException | None = None
        self.stack: traceback.StackSummary | None = None
        if configuration.record_stacktrace:
            self.stack = _caller_stack()
            self.get_error()

    def get_message(self) -> str:
        return self._message

    def get_error(self) -> BaseException:
        """Get the error that describes the failure.

        Returns:
            The same transformed error on every call.

        Raises:
            TypeError: If the error transformer does not return an exception.
        """
        if self._error is None:
            error = self._error_transformer(self._error_builder(self._message))
            if not isinstance(error, BaseException):
                raise TypeError(f"error_transformer must return an exception.\nactual: {error!r}")
            self._error = error
        return self._error

    def __repr__(self) -> str:
        return f"ValidationFailure(message={self._message!r})"


class ValidationFailures(Sequence[ValidationFailure]):
    """Ordered, immutable collection of validation failures.

    Example:
        failures = check_if(value, "value").is_positive().else_get_failures()
        if not failures.is_empty():
            for message in failures.get_messages():
                print(message)
    """

    def __init__(self, failures: Iterable[ValidationFailure] = ()) -> None:
        self._failures: tuple[ValidationFailure, ...] = tuple(failures)

    def is_empty(self) -> bool:
        return not self._failures

    def get_failures(self) -> tuple[ValidationFailure, ...]:
        return self._failures

    def get_messages(self) -> list[str]:
        """Get the message of every failure."""
        return [failure.get_message() for failure in self._failures]

    def get_error(self) -> BaseException | None:
        """Get an error that describes every failure.

        Returns:
            None if there are no failures, the failure's own error if there is
            exactly one, otherwise a ``MultipleFailuresError``.
        """
        if not self._failures:
            return None
        if len(self._failures) == 1:
            return self._failures[0].get_error()
        return MultipleFailuresError(self._failures)

    def raise_on_failure(self) -> None:
        """Raise ``get_error()`` if there are any failures."""
        error = self.get_error()
        if error is not None:
            raise error

    @overload
    def __getitem__(self, index: int) -> ValidationFailure: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[ValidationFailure]: ...

    def __getitem__(self, index: int | slice) -> ValidationFailure | Sequence[ValidationFailure]:
        return self._failures[index]

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self._failures)

    def __repr__(self) -> str:
        return f"ValidationFailures({list(self._failures)!r})"
