"""The value being validated, or the absence of a usable value."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

__all__ = ["ValidationTarget"]

T = TypeVar("T")
U = TypeVar("U")


class ValidationTarget(Generic[T]):
    """Wraps the value of a validator.

    A target is either valid, holding a value that may be ``None``, or
    invalid, holding nothing. Validation continues against an invalid target
    so that a failed ``None`` check does not stop the remaining checks from
    being recorded.

    Instances are immutable.
    """

    __slots__ = ("_valid", "_value")

    _INVALID: ValidationTarget[Any]

    def __init__(self, valid: bool, value: T) -> None:
        self._valid = valid
        self._value = value

    @classmethod
    def valid(cls, value: T) -> ValidationTarget[T]:
        """Return a valid target holding ``value``."""
        return cls(True, value)

    @classmethod
    def invalid(cls) -> ValidationTarget[Any]:
        """Return the invalid target."""
        return cls._INVALID

    def is_valid(self) -> bool:
        return self._valid

    def is_none(self) -> bool:
        """Check if the target is valid and holds ``None``."""
        return self._valid and self._value is None

    def none_to_invalid(self) -> ValidationTarget[T]:
        """Return the invalid target if this target holds ``None``, otherwise self."""
        if self.is_none():
            return ValidationTarget.invalid()
        return self

    def map(self, mapper: Callable[[T], U]) -> ValidationTarget[U]:
        """Apply ``mapper`` to the value of a valid target.

        Returns:
            The invalid target if this target is invalid, self if ``mapper``
            returns the same object, otherwise a new valid target.
        """
        if not self._valid:
            return ValidationTarget.invalid()
        mapped = mapper(self._value)
        if mapped is self._value:
            return self  # type: ignore[return-value]
        return ValidationTarget.valid(mapped)

    def validation_failed(self, predicate: Callable[[T], bool]) -> bool:
        """Check if the target is invalid or its value does not match ``predicate``.

        ``predicate`` is not called for an invalid target.
        """
        return not self._valid or not predicate(self._value)

    def or_else(self, default: T) -> T:
        """Return the value if the target is valid, otherwise ``default``."""
        if self._valid:
            return self._value
        return default

    def or_get(self, supplier: Callable[[], T]) -> T:
        """Return the value if the target is valid, otherwise the result of ``supplier``."""
        if self._valid:
            return self._value
        return supplier()

    def if_valid(self, consumer: Callable[[T], None]) -> None:
        """Pass the value to ``consumer`` if the target is valid."""
        if self._valid:
            consumer(self._value)

    def or_raise(self, error_supplier: Callable[[], BaseException]) -> T:
        """Return the value if the target is valid.

        Raises:
            BaseException: The error returned by ``error_supplier`` if the target is invalid.
        """
        if self._valid:
            return self._value
        raise error_supplier()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationTarget):
            return NotImplemented
        if not self._valid:
            return not other._valid
        return other._valid and self._value == other._value

    def __repr__(self) -> str:
        if not self._valid:
            return "ValidationTarget.invalid()"
        return f"ValidationTarget.valid({self._value!r})"


ValidationTarget._INVALID = ValidationTarget(False, None)
