"""Tests for the Validators factory, ObjectValidator and BooleanValidator."""

from __future__ import annotations

from fractions import Fraction
from typing import Any

import pytest
from hypothesis import given, settings

from fluent_requirements.factory import Validators, to_assertion_error, validator_class_for
from fluent_requirements.global_configuration import GlobalConfiguration
from fluent_requirements.terminal import TerminalEncoding
from fluent_requirements.validators import (
    BooleanValidator,
    ListValidator,
    MapValidator,
    NumberValidator,
    ObjectValidator,
    SetValidator,
    StringValidator,
)

from .conftest import invalid_names, names, new_validators

# =============================================================================
# Dispatch Unit Tests
# =============================================================================


class TestDispatchUnit:
    """Unit tests for choosing a validator by the runtime type of a value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, BooleanValidator),
            (5, NumberValidator),
            (1.5, NumberValidator),
            (Fraction(1, 3), NumberValidator),
            ("text", StringValidator),
            ([1], ListValidator),
            ((1,), ListValidator),
            ({1}, SetValidator),
            (frozenset(), SetValidator),
            ({"a": 1}, MapValidator),
            (None, ObjectValidator),
            (object(), ObjectValidator),
        ],
    )
    def test_validator_class_for(self, validators: Validators, value: Any, expected: type) -> None:
        assert validator_class_for(value) is expected
        assert type(validators.require_that(value, "actual")) is expected
        assert type(validators.check_if(value, "actual")) is expected

    def test_typed_variants_accept_none(self, validators: Validators) -> None:
        assert isinstance(validators.require_that_number(None, "actual"), NumberValidator)
        assert isinstance(validators.require_that_string(None, "actual"), StringValidator)
        assert isinstance(validators.check_if_list(None, "actual"), ListValidator)
        assert isinstance(validators.check_if_set(None, "actual"), SetValidator)
        assert isinstance(validators.check_if_map(None, "actual"), MapValidator)
        assert isinstance(validators.check_if_boolean(None, "actual"), BooleanValidator)
        assert isinstance(validators.check_if_object(5, "actual"), ObjectValidator)

    def test_get_value_returns_the_same_object(self, validators: Validators) -> None:
        value = [1, 2]

        assert validators.require_that(value, "actual").get_value() is value


# =============================================================================
# Name Validation Tests
# =============================================================================


class TestNameValidation:
    """Names identify values in failure messages and may not contain whitespace."""

    @given(name=invalid_names)
    @settings(max_examples=50)
    def test_invalid_names_are_rejected(self, name: str) -> None:
        validators = new_validators()

        with pytest.raises(ValueError):
            validators.require_that(5, name)
        with pytest.raises(ValueError):
            validators.check_if(5, name)

    @given(name=names)
    @settings(max_examples=50)
    def test_valid_names_are_accepted(self, name: str) -> None:
        assert new_validators().require_that(5, name).get_name() == name

    def test_name_must_be_a_string(self, validators: Validators) -> None:
        with pytest.raises(TypeError):
            validators.require_that(5, 42)  # type: ignore[call-overload]

    def test_context_names_are_validated(self, validators: Validators) -> None:
        with pytest.raises(ValueError):
            validators.with_context(1, "")
        with pytest.raises(ValueError):
            validators.require_that(5, "actual").with_context(1, "two words")


# =============================================================================
# Failure Mode Unit Tests
# =============================================================================


class TestFailureModesUnit:
    """Unit tests for require_that(), check_if() and assert_that()."""

    def test_require_that_raises_first_failure(self, validators: Validators) -> None:
        with pytest.raises(ValueError) as excinfo:
            validators.require_that(5, "actual").is_greater_than(10).is_less_than(0)

        assert str(excinfo.value).startswith('"actual" must be greater than 10.')
        assert "actual: 5" in str(excinfo.value)

    def test_check_if_collects_failures(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual").is_greater_than(10).is_less_than(0)

        assert validator.else_get_messages() == [
            '"actual" must be greater than 10.\nactual: 5',
            '"actual" must be less than 0.\nactual: 5',
        ]

    def test_else_throw_returns_true_without_failures(self, validators: Validators) -> None:
        assert validators.check_if(5, "actual").is_positive().else_throw() is True

    def test_assert_that_is_skipped_when_disabled(self) -> None:
        validators = new_validators(assertions_enabled=False)
        calls: list[Validators] = []

        validators.assert_that(calls.append)

        assert calls == []
        assert validators.assert_that_and_return(lambda v: 42) is None

    def test_assert_that_raises_assertion_error(self) -> None:
        validators = new_validators(assertions_enabled=True)

        with pytest.raises(AssertionError) as excinfo:
            validators.assert_that(lambda v: v.require_that(5, "actual").is_greater_than(10))

        assert str(excinfo.value).startswith('"actual" must be greater than 10.')
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_assert_that_and_return(self) -> None:
        validators = new_validators(assertions_enabled=True)

        result = validators.assert_that_and_return(lambda v: v.require_that(5, "actual").is_positive().get_value())

        assert result == 5

    def test_assertions_setting_is_read_on_every_call(self, scope: GlobalConfiguration) -> None:
        validators = Validators(scope)
        calls: list[Validators] = []

        validators.assert_that(calls.append)
        scope.assertions_enabled = True
        validators.assert_that(calls.append)

        assert len(calls) == 1

    def test_assert_that_requires_callable(self, validators: Validators) -> None:
        with pytest.raises(TypeError):
            validators.assert_that("not callable")  # type: ignore[arg-type]

    def test_to_assertion_error(self) -> None:
        cause = TypeError("wrong type")

        error = to_assertion_error(cause)

        assert isinstance(error, AssertionError)
        assert str(error) == "wrong type"
        assert error.__cause__ is cause
        assert to_assertion_error(error) is error


# =============================================================================
# Factory Configuration Unit Tests
# =============================================================================


class TestFactoryConfigurationUnit:
    """Unit tests for the configuration a factory hands to its validators."""

    def test_terminal_settings_come_from_scope(self) -> None:
        validators = new_validators(TerminalEncoding.COLORS_256, 100)

        assert validators.configuration().terminal_encoding is TerminalEncoding.COLORS_256
        assert validators.configuration().terminal_width == 100

    def test_diff_disabled_by_scope(self, scope: GlobalConfiguration) -> None:
        scope.diff_enabled = False

        assert Validators(scope).configuration().allow_diff is False

    def test_update_configuration(self, validators: Validators) -> None:
        with validators.update_configuration() as updater:
            updater.allow_diff(False)

        assert validators.configuration().allow_diff is False
        validator = validators.check_if("a long actual value", "actual").is_equal_to("a long other value")
        assert "Legend" not in validator.else_get_messages()[0]

    def test_updated_transformer_applies_to_require_that(self, validators: Validators) -> None:
        with validators.update_configuration() as updater:
            updater.error_transformer(lambda error: RuntimeError(str(error)))

        with pytest.raises(RuntimeError, match="must be positive"):
            validators.require_that(-1, "actual").is_positive()

    def test_check_if_never_raises(self, validators: Validators) -> None:
        validator = validators.check_if(-1, "actual")

        validator.is_positive().is_zero()

        assert len(validator.else_get_failures()) == 2


# =============================================================================
# Context Unit Tests
# =============================================================================


class TestContextUnit:
    """Unit tests for the context included in failure messages."""

    def test_factory_context_is_inherited(self, validators: Validators) -> None:
        validators.with_context("req-1", "request")

        with pytest.raises(ValueError) as excinfo:
            validators.require_that(5, "actual").is_greater_than(10)

        assert str(excinfo.value) == '"actual" must be greater than 10.\nactual : 5\nrequest: "req-1"'

    def test_remove_context(self, validators: Validators) -> None:
        validators.with_context("req-1", "request").remove_context("request").remove_context("missing")

        assert validators.get_context() == {}

    def test_validator_context_does_not_leak_into_factory(self, validators: Validators) -> None:
        validators.require_that(5, "actual").with_context(1, "attempt")

        assert validators.get_context() == {}

    def test_factory_context_is_copied_into_validators(self, validators: Validators) -> None:
        validator = validators.with_context(1, "attempt").require_that(5, "actual")
        validators.remove_context("attempt")

        assert validator.get_context() == {"attempt": 1}

    def test_copy_is_independent(self, validators: Validators) -> None:
        validators.with_context(1, "attempt")

        copy = validators.copy()
        copy.with_context("x", "label")
        with copy.update_configuration() as updater:
            updater.allow_diff(False)

        assert isinstance(copy, Validators)
        assert copy.get_context() == {"attempt": 1, "label": "x"}
        assert validators.get_context() == {"attempt": 1}
        assert validators.configuration().allow_diff is True
        assert copy.get_scope() is validators.get_scope()

    def test_and_runs_nested_validations(self, validators: Validators) -> None:
        validator = validators.check_if(5, "actual")

        result = validator.and_(lambda v: v.is_negative().with_context("nested", "where"))

        assert result is validator
        assert validator.else_get_messages() == ['"actual" must be negative.\nactual: 5']
        assert validator.get_context() == {"where": "nested"}

    def test_and_requires_callable(self, validators: Validators) -> None:
        with pytest.raises(TypeError):
            validators.require_that(5, "actual").and_(None)  # type: ignore[arg-type]


# =============================================================================
# ObjectValidator Unit Tests
# =============================================================================


class TestObjectValidatorUnit:
    """Unit tests for predicates that apply to any value."""

    def test_none(self, validators: Validators) -> None:
        validators.require_that_object(None, "actual").is_none()
        validators.require_that(5, "actual").is_not_none()

        with pytest.raises(ValueError) as excinfo:
            validators.require_that(5, "actual").is_none()
        assert str(excinfo.value) == '"actual" must be None.\nactual: 5'

        with pytest.raises(TypeError) as type_excinfo:
            validators.require_that(None, "actual").is_not_none()
        assert str(type_excinfo.value) == '"actual" may not be None'

    def test_equal_to(self, validators: Validators) -> None:
        validators.require_that([1, 2], "actual").is_equal_to([1, 2]).is_not_equal_to([2, 1])

    def test_not_equal_to_message(self, validators: Validators) -> None:
        with pytest.raises(ValueError) as excinfo:
            validators.require_that(5, "actual").is_not_equal_to(5)

        assert str(excinfo.value) == '"actual" may not be equal to 5'

    def test_named_not_equal_to_message(self, validators: Validators) -> None:
        with pytest.raises(ValueError) as excinfo:
            validators.require_that(5, "actual").is_not_equal_to(5, "forbidden")

        assert str(excinfo.value) == '"actual" may not be equal to "forbidden".\nactual: 5'

    def test_same_reference(self, validators: Validators) -> None:
        value = [1]
        validators.require_that(value, "actual").is_same_reference_as(value, "other").is_not_same_reference_as(
            [1], "copy"
        )

        with pytest.raises(ValueError) as excinfo:
            validators.require_that(value, "actual").is_same_reference_as([1], "other")

        assert str(excinfo.value) == '"actual" must be the same object as "other".\nactual: [1]\nother : [1]'

    def test_instance_of(self, validators: Validators) -> None:
        validators.require_that(True, "actual").is_instance_of(int).is_not_instance_of(str)

        with pytest.raises(TypeError) as excinfo:
            validators.require_that(5, "actual").is_instance_of((str, bytes))

        assert str(excinfo.value) == '"actual" must be an instance of str | bytes.\nactual     : 5\nactual.type: int'

    def test_repr(self, validators: Validators) -> None:
        assert repr(validators.require_that(5, "actual")) == (
            "NumberValidator(name='actual', value=ValidationTarget.valid(5))"
        )


class TestObjectConversionUnit:
    """Unit tests for the as_* conversions of ObjectValidator."""

    def test_as_number(self, validators: Validators) -> None:
        number = validators.require_that_object(5, "actual").as_number()

        assert isinstance(number, NumberValidator)
        number.is_positive()

    def test_as_number_of_wrong_type(self, validators: Validators) -> None:
        with pytest.raises(TypeError) as excinfo:
            validators.require_that_object("5", "actual").as_number()

        assert str(excinfo.value) == '"actual" must be an instance of Real.\nactual     : "5"\nactual.type: str'

    def test_failed_conversion_makes_value_unavailable(self, validators: Validators) -> None:
        validator = validators.check_if_object("5", "actual")

        number = validator.as_number().is_positive()

        assert [type(failure.get_error()) for failure in validator.else_get_failures()] == [TypeError, ValueError]
        assert number.get_value_or_default(0) == 0

    def test_none_passes_through_conversion(self, validators: Validators) -> None:
        validator = validators.check_if(None, "actual")

        validator.as_number().is_positive()

        assert validator.else_get_messages() == [
            '"actual" may not be None',
            '"actual" must be positive.\nactual: None',
        ]

    def test_as_string(self, validators: Validators) -> None:
        validators.require_that_object(5, "actual").as_string().is_equal_to("5")

        assert validators.check_if(None, "actual").as_string().get_value_or_default("x") is None

    def test_other_conversions(self, validators: Validators) -> None:
        assert isinstance(validators.require_that_object(True, "actual").as_boolean(), BooleanValidator)
        assert isinstance(validators.require_that_object((1,), "actual").as_list(), ListValidator)
        assert isinstance(validators.require_that_object({1}, "actual").as_set(), SetValidator)
        assert isinstance(validators.require_that_object({}, "actual").as_map(), MapValidator)

        with pytest.raises(TypeError):
            validators.require_that_object([1], "actual").as_map()


# =============================================================================
# BooleanValidator Unit Tests
# =============================================================================


class TestBooleanValidatorUnit:
    """Unit tests for BooleanValidator."""

    def test_true_and_false(self, validators: Validators) -> None:
        validators.require_that(True, "actual").is_true().is_equal_to(True)
        validators.require_that(False, "actual").is_false()

    def test_messages(self, validators: Validators) -> None:
        with pytest.raises(ValueError) as excinfo:
            validators.require_that(True, "actual").is_false()

        assert str(excinfo.value) == '"actual" must be false'

    def test_truthy_values_are_not_true(self, validators: Validators) -> None:
        assert validators.check_if_boolean(1, "actual").is_true().validation_failed()  # type: ignore[arg-type]

    def test_none(self, validators: Validators) -> None:
        failures = validators.check_if_boolean(None, "actual").is_true().else_get_failures()

        assert [type(failure.get_error()) for failure in failures] == [TypeError, ValueError]
