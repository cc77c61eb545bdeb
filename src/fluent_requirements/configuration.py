"""Configuration records for validator factories.

``Configuration`` is an immutable pydantic model; every change produces a
new instance. ``ConfigurationUpdater`` is the single-use session a factory
hands out to change its configuration.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from fluent_requirements.errors import IllegalStateError
from fluent_requirements.string_mappers import MutableStringMappers, StringMappers
from fluent_requirements.terminal import DEFAULT_WIDTH, TerminalEncoding

__all__ = [
    "Configuration",
    "ConfigurationUpdater",
    "ErrorTransformer",
    "MutableConfiguration",
    "UpdaterState",
]

logger = logging.getLogger(__name__)

ErrorTransformer = Callable[[BaseException], BaseException]


def _identity(error: BaseException) -> BaseException:
    return error


class Configuration(BaseModel):
    """Determines the behavior of a validator.

    Attributes:
        allow_diff: Whether failure messages may include a diff of the actual and
            expected values.
        string_mappers: Converts values to the strings shown in failure messages.
        record_stacktrace: Whether to build each error as soon as its failure is
            recorded, capturing the call-site stack. If False, errors are built
            on first access.
        throw_on_failure: Whether a validator raises as soon as a failure is
            recorded. If False, failures are only collected.
        error_transformer: Applied exactly once to each error before it is
            raised or returned.
        terminal_encoding: The colours used to render diffs.
        terminal_width: The width of the terminal, in characters.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    allow_diff: bool = True
    string_mappers: StringMappers = Field(default_factory=StringMappers.default)
    record_stacktrace: bool = True
    throw_on_failure: bool = True
    error_transformer: ErrorTransformer = _identity
    terminal_encoding: TerminalEncoding = TerminalEncoding.NO_COLORS
    terminal_width: int = Field(default=DEFAULT_WIDTH, gt=0)

    def with_allow_diff(self, allow_diff: bool) -> Configuration:
        """Return a copy of this configuration with ``allow_diff`` replaced."""
        return self._with(allow_diff=allow_diff)

    def with_string_mappers(self, string_mappers: StringMappers) -> Configuration:
        """Return a copy of this configuration with ``string_mappers`` replaced."""
        return self._with(string_mappers=string_mappers)

    def with_record_stacktrace(self, record_stacktrace: bool) -> Configuration:
        """Return a copy of this configuration with ``record_stacktrace`` replaced."""
        return self._with(record_stacktrace=record_stacktrace)

    def with_throw_on_failure(self, throw_on_failure: bool) -> Configuration:
        """Return a copy of this configuration with ``throw_on_failure`` replaced."""
        return self._with(throw_on_failure=throw_on_failure)

    def with_error_transformer(self, error_transformer: ErrorTransformer) -> Configuration:
        """Return a copy of this configuration with ``error_transformer`` replaced.

        Raises:
            TypeError: If ``error_transformer`` is not callable.
        """
        if not callable(error_transformer):
            raise TypeError(f"error_transformer must be callable.\nactual: {error_transformer!r}")
        return self._with(error_transformer=error_transformer)

    def with_terminal(self, encoding: TerminalEncoding, width: int) -> Configuration:
        """Return a copy of this configuration with the terminal settings replaced."""
        if width <= 0:
            raise ValueError(f"width must be positive.\nactual: {width}")
        return self._with(terminal_encoding=encoding, terminal_width=width)

    def to_string(self, value: object) -> str:
        """Convert ``value`` to the string shown in failure messages."""
        return self.string_mappers.to_string(value)

    def _with(self, **update: object) -> Configuration:
        # model_copy always allocates, even when the value is unchanged
        return self.model_copy(update=update)

    def to_mutable(self) -> MutableConfiguration:
        """Return a mutable copy of this configuration."""
        return MutableConfiguration(self)


class MutableConfiguration:
    """A mutable view of a ``Configuration``, used while an update is in progress."""

    def __init__(self, configuration: Configuration) -> None:
        self.allow_diff = configuration.allow_diff
        self.string_mappers: MutableStringMappers = configuration.string_mappers.to_mutable()
        self.record_stacktrace = configuration.record_stacktrace
        self.throw_on_failure = configuration.throw_on_failure
        self.error_transformer: ErrorTransformer = configuration.error_transformer
        self._terminal_encoding = configuration.terminal_encoding
        self._terminal_width = configuration.terminal_width

    def to_immutable(self) -> Configuration:
        """Return an immutable snapshot of the current values."""
        return Configuration(
            allow_diff=self.allow_diff,
            string_mappers=self.string_mappers.to_immutable(),
            record_stacktrace=self.record_stacktrace,
            throw_on_failure=self.throw_on_failure,
            error_transformer=self.error_transformer,
            terminal_encoding=self._terminal_encoding,
            terminal_width=self._terminal_width,
        )


class UpdaterState(Enum):
    """Lifecycle of a ``ConfigurationUpdater``."""

    OPEN = "open"
    CLOSED = "closed"


class ConfigurationUpdater:
    """Single-use session that updates a factory's configuration.

    Changes are staged until ``close()`` is called, which commits them. After
    that, every mutator raises ``IllegalStateError``. Use it as a context
    manager to commit on exit.

    Example:
        with validators.update_configuration() as updater:
            updater.allow_diff(False).record_stacktrace(False)
    """

    def __init__(
        self,
        configuration: Configuration,
        on_close: Callable[[Configuration], None],
    ) -> None:
        """Initialize the updater.

        Args:
            configuration: The configuration to start from.
            on_close: Receives the updated configuration when the session closes.
        """
        self._configuration = configuration.to_mutable()
        self._on_close = on_close
        self._state = UpdaterState.OPEN

    @property
    def state(self) -> UpdaterState:
        """The current lifecycle state."""
        return self._state

    def _ensure_open(self) -> MutableConfiguration:
        if self._state is not UpdaterState.OPEN:
            raise IllegalStateError("The updater is closed.")
        return self._configuration

    def allow_diff(self, allow_diff: bool) -> ConfigurationUpdater:
        """Set whether failure messages may include a diff.

        Returns:
            Self for method chaining.
        """
        self._ensure_open().allow_diff = allow_diff
        return self

    def record_stacktrace(self, record_stacktrace: bool) -> ConfigurationUpdater:
        """Set whether errors are built, and their stack captured, when a failure is recorded.

        Returns:
            Self for method chaining.
        """
        self._ensure_open().record_stacktrace = record_stacktrace
        return self

    def error_transformer(self, error_transformer: ErrorTransformer) -> ConfigurationUpdater:
        """Set the function applied to every error before it is raised or returned.

        Returns:
            Self for method chaining.

        Raises:
            TypeError: If ``error_transformer`` is not callable.
        """
        if not callable(error_transformer):
            raise TypeError(f"error_transformer must be callable.\nactual: {error_transformer!r}")
        self._ensure_open().error_transformer = error_transformer
        return self

    def string_mappers(self) -> MutableStringMappers:
        """Get the string mappers being updated."""
        return self._ensure_open().string_mappers

    def close(self) -> None:
        """Commit the changes. Subsequent calls have no effect."""
        if self._state is UpdaterState.CLOSED:
            return
        self._state = UpdaterState.CLOSED
        updated = self._configuration.to_immutable()
        logger.debug("Committing configuration update: %s", updated)
        self._on_close(updated)

    def __enter__(self) -> ConfigurationUpdater:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()
