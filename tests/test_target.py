"""Tests for ValidationTarget."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fluent_requirements.target import ValidationTarget

from .conftest import small_ints

# =============================================================================
# ValidationTarget Unit Tests
# =============================================================================


class TestValidationTargetUnit:
    """Unit tests for ValidationTarget."""

    def test_valid_target_holds_value(self) -> None:
        target = ValidationTarget.valid(5)

        assert target.is_valid()
        assert not target.is_none()
        assert target.or_else(0) == 5

    def test_valid_target_may_hold_none(self) -> None:
        target = ValidationTarget.valid(None)

        assert target.is_valid()
        assert target.is_none()

    def test_invalid_target_is_a_singleton(self) -> None:
        assert ValidationTarget.invalid() is ValidationTarget.invalid()
        assert not ValidationTarget.invalid().is_valid()
        assert not ValidationTarget.invalid().is_none()

    def test_none_to_invalid(self) -> None:
        assert ValidationTarget.valid(None).none_to_invalid() is ValidationTarget.invalid()

        target = ValidationTarget.valid(0)
        assert target.none_to_invalid() is target

    def test_map_returns_self_for_identical_result(self) -> None:
        value = [1, 2]
        target = ValidationTarget.valid(value)

        assert target.map(lambda v: v) is target

    def test_map_returns_new_target(self) -> None:
        mapped = ValidationTarget.valid("abc").map(len)

        assert mapped == ValidationTarget.valid(3)

    def test_map_skips_invalid_target(self) -> None:
        calls: list[object] = []

        result = ValidationTarget.invalid().map(calls.append)

        assert result is ValidationTarget.invalid()
        assert calls == []

    def test_validation_failed(self) -> None:
        target = ValidationTarget.valid(5)

        assert not target.validation_failed(lambda v: v > 0)
        assert target.validation_failed(lambda v: v < 0)

    def test_invalid_target_always_fails_without_calling_predicate(self) -> None:
        calls: list[object] = []

        def predicate(value: object) -> bool:
            calls.append(value)
            return True

        assert ValidationTarget.invalid().validation_failed(predicate)
        assert calls == []

    def test_or_get(self) -> None:
        assert ValidationTarget.valid(1).or_get(lambda: 2) == 1
        assert ValidationTarget.invalid().or_get(lambda: 2) == 2

    def test_if_valid(self) -> None:
        seen: list[int] = []

        ValidationTarget.valid(1).if_valid(seen.append)
        ValidationTarget.invalid().if_valid(seen.append)

        assert seen == [1]

    def test_or_raise(self) -> None:
        assert ValidationTarget.valid("x").or_raise(lambda: KeyError("missing")) == "x"
        with pytest.raises(KeyError):
            ValidationTarget.invalid().or_raise(lambda: KeyError("missing"))

    def test_equality(self) -> None:
        assert ValidationTarget.valid(1) == ValidationTarget.valid(1)
        assert ValidationTarget.valid(1) != ValidationTarget.valid(2)
        assert ValidationTarget.valid(None) != ValidationTarget.invalid()
        assert ValidationTarget.invalid() == ValidationTarget(False, None)

    def test_targets_are_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(ValidationTarget.valid(1))

    def test_repr(self) -> None:
        assert repr(ValidationTarget.valid("a")) == "ValidationTarget.valid('a')"
        assert repr(ValidationTarget.invalid()) == "ValidationTarget.invalid()"


# =============================================================================
# ValidationTarget Property-Based Tests
# =============================================================================


class TestValidationTargetProperties:
    """Property-based tests for ValidationTarget."""

    @given(value=small_ints)
    @settings(max_examples=50)
    def test_map_composes(self, value: int) -> None:
        """Mapping twice equals mapping with the composed function."""
        target = ValidationTarget.valid(value)

        def double(v: int) -> int:
            return v * 2

        def shift(v: int) -> int:
            return v + 3

        assert target.map(double).map(shift) == target.map(lambda v: shift(double(v)))

    @given(value=st.one_of(st.none(), small_ints, st.text(max_size=5)))
    @settings(max_examples=50)
    def test_or_else_returns_value_of_valid_target(self, value: object) -> None:
        assert ValidationTarget.valid(value).or_else(object()) is value
