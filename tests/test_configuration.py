"""Tests for Configuration, ConfigurationUpdater and GlobalConfiguration."""

from __future__ import annotations

import logging

import pydantic
import pytest
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from fluent_requirements.configuration import Configuration, ConfigurationUpdater, UpdaterState
from fluent_requirements.errors import IllegalStateError
from fluent_requirements.global_configuration import GlobalConfiguration, get_global_configuration
from fluent_requirements.string_mappers import StringMappers
from fluent_requirements.terminal import TerminalEncoding
from fluent_requirements.type_info import Type

# =============================================================================
# Configuration Unit Tests
# =============================================================================


class TestConfigurationUnit:
    """Unit tests for the immutable Configuration model."""

    def test_defaults(self) -> None:
        configuration = Configuration()

        assert configuration.allow_diff is True
        assert configuration.record_stacktrace is True
        assert configuration.throw_on_failure is True
        assert configuration.string_mappers == StringMappers.default()
        assert configuration.terminal_encoding is TerminalEncoding.NO_COLORS
        assert configuration.terminal_width == 80

    def test_default_transformer_is_identity(self) -> None:
        error = ValueError("x")

        assert Configuration().error_transformer(error) is error

    def test_is_frozen(self) -> None:
        configuration = Configuration()

        with pytest.raises(pydantic.ValidationError):
            configuration.allow_diff = False  # type: ignore[misc]

    def test_with_methods_return_copies(self) -> None:
        original = Configuration()

        updated = original.with_allow_diff(False).with_record_stacktrace(False).with_throw_on_failure(False)

        assert original.allow_diff and original.record_stacktrace and original.throw_on_failure
        assert not updated.allow_diff
        assert not updated.record_stacktrace
        assert not updated.throw_on_failure

    def test_with_string_mappers(self) -> None:
        mappers = StringMappers.default().with_mapper(Type.named_class(int), lambda value, seen: "int!")

        configuration = Configuration().with_string_mappers(mappers)

        assert configuration.to_string(5) == "int!"
        assert Configuration().to_string(5) == "5"

    def test_with_error_transformer_requires_callable(self) -> None:
        with pytest.raises(TypeError):
            Configuration().with_error_transformer("not callable")  # type: ignore[arg-type]

    def test_with_terminal(self) -> None:
        configuration = Configuration().with_terminal(TerminalEncoding.COLORS_256, 120)

        assert configuration.terminal_encoding is TerminalEncoding.COLORS_256
        assert configuration.terminal_width == 120

    def test_terminal_width_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            Configuration().with_terminal(TerminalEncoding.NO_COLORS, 0)
        with pytest.raises(pydantic.ValidationError):
            Configuration(terminal_width=0)

    def test_mutable_round_trip_preserves_values(self) -> None:
        original = Configuration(allow_diff=False, terminal_width=100)

        assert original.to_mutable().to_immutable() == original


# =============================================================================
# ConfigurationUpdater Unit Tests
# =============================================================================


class TestConfigurationUpdaterUnit:
    """Unit tests for ConfigurationUpdater."""

    def test_close_commits_changes(self) -> None:
        committed: list[Configuration] = []
        updater = ConfigurationUpdater(Configuration(), committed.append)

        updater.allow_diff(False).record_stacktrace(False)
        assert committed == []
        updater.close()

        assert len(committed) == 1
        assert not committed[0].allow_diff
        assert not committed[0].record_stacktrace

    def test_close_is_idempotent(self) -> None:
        committed: list[Configuration] = []
        updater = ConfigurationUpdater(Configuration(), committed.append)

        updater.close()
        updater.close()

        assert len(committed) == 1
        assert updater.state is UpdaterState.CLOSED

    def test_mutators_fail_after_close(self) -> None:
        updater = ConfigurationUpdater(Configuration(), lambda configuration: None)
        updater.close()

        with pytest.raises(IllegalStateError):
            updater.allow_diff(True)
        with pytest.raises(IllegalStateError):
            updater.record_stacktrace(True)
        with pytest.raises(IllegalStateError):
            updater.error_transformer(lambda error: error)
        with pytest.raises(IllegalStateError):
            updater.string_mappers()

    def test_context_manager_commits_on_exit(self) -> None:
        committed: list[Configuration] = []

        with ConfigurationUpdater(Configuration(), committed.append) as updater:
            updater.string_mappers().put(Type.named_class(int), lambda value, seen: "number")

        assert committed[0].to_string(1) == "number"

    def test_error_transformer_requires_callable(self) -> None:
        updater = ConfigurationUpdater(Configuration(), lambda configuration: None)

        with pytest.raises(TypeError):
            updater.error_transformer(42)  # type: ignore[arg-type]

    def test_terminal_settings_survive_update(self) -> None:
        committed: list[Configuration] = []
        original = Configuration().with_terminal(TerminalEncoding.COLORS_16, 100)

        ConfigurationUpdater(original, committed.append).close()

        assert committed[0].terminal_encoding is TerminalEncoding.COLORS_16
        assert committed[0].terminal_width == 100

    def test_close_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fluent_requirements.configuration")

        ConfigurationUpdater(Configuration(), lambda configuration: None).close()

        assert "Committing configuration update" in caplog.text


class ConfigurationUpdaterStateMachine(RuleBasedStateMachine):
    """Stateful test for the updater lifecycle."""

    def __init__(self) -> None:
        super().__init__()
        self.committed: list[Configuration] = []
        self.updater = ConfigurationUpdater(Configuration(), self.committed.append)
        self.allow_diff = True
        self.record_stacktrace = True
        self.closed = False

    @rule(value=st.booleans())
    def set_allow_diff(self, value: bool) -> None:
        if self.closed:
            with pytest.raises(IllegalStateError):
                self.updater.allow_diff(value)
            return
        self.updater.allow_diff(value)
        self.allow_diff = value

    @rule(value=st.booleans())
    def set_record_stacktrace(self, value: bool) -> None:
        if self.closed:
            with pytest.raises(IllegalStateError):
                self.updater.record_stacktrace(value)
            return
        self.updater.record_stacktrace(value)
        self.record_stacktrace = value

    @rule()
    def close(self) -> None:
        self.updater.close()
        self.closed = True

    @invariant()
    def commits_at_most_once(self) -> None:
        assert len(self.committed) == (1 if self.closed else 0)

    @invariant()
    def committed_values_match_last_open_values(self) -> None:
        if self.committed:
            assert self.committed[0].allow_diff == self.allow_diff
            assert self.committed[0].record_stacktrace == self.record_stacktrace

    @invariant()
    def state_matches(self) -> None:
        expected = UpdaterState.CLOSED if self.closed else UpdaterState.OPEN
        assert self.updater.state is expected


TestConfigurationUpdaterStateful = ConfigurationUpdaterStateMachine.TestCase


# =============================================================================
# GlobalConfiguration Unit Tests
# =============================================================================


class TestGlobalConfigurationUnit:
    """Unit tests for GlobalConfiguration."""

    def test_defaults(self) -> None:
        scope = GlobalConfiguration()

        assert scope.assertions_enabled is False
        assert scope.diff_enabled is True

    def test_singleton(self) -> None:
        assert get_global_configuration() is get_global_configuration()

    def test_explicit_terminal_settings(self) -> None:
        scope = GlobalConfiguration()
        scope.terminal_encoding = TerminalEncoding.COLORS_256
        scope.terminal_width = 132

        assert scope.terminal_encoding is TerminalEncoding.COLORS_256
        assert scope.terminal_width == 132

    def test_terminal_detection_is_lazy_and_cached(self) -> None:
        scope = GlobalConfiguration()

        first = scope.terminal_width

        assert first > 0
        assert scope.terminal_width == first
        assert isinstance(scope.terminal_encoding, TerminalEncoding)

    def test_invalid_terminal_settings(self) -> None:
        scope = GlobalConfiguration()

        with pytest.raises(TypeError):
            scope.terminal_encoding = "16m"  # type: ignore[assignment]
        with pytest.raises(ValueError):
            scope.terminal_width = 0

    def test_use_best_returns_self(self) -> None:
        scope = GlobalConfiguration()

        assert scope.use_best_terminal_encoding() is scope
        assert scope.use_best_terminal_width() is scope
