"""Type descriptors used to key string mappers and to describe values in messages."""

from __future__ import annotations

import types
from dataclasses import dataclass
from enum import Enum, auto
from functools import partial
from typing import Any, ClassVar

__all__ = ["Type", "TypeCategory"]

_PRIMITIVES: frozenset[type] = frozenset({bool, int, float, complex, str, bytes})
_CALLABLE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    partial,
)


class TypeCategory(Enum):
    """Discriminant of a ``Type``."""

    NONE = auto()
    """The value is ``None``."""

    PRIMITIVE = auto()
    """The value is an exact instance of a built-in scalar type (bool, int, float, complex, str, bytes)."""

    NAMED_CLASS = auto()
    """The value is an instance of any other class."""

    CLASS = auto()
    """The value is itself a class."""

    FUNCTION = auto()
    """The value is a function, method or ``functools.partial``."""


@dataclass(frozen=True)
class Type:
    """Describes the type of a value.

    A closed tagged union: ``category`` is the discriminant and ``cls`` the
    class identity token (``None`` only for ``TypeCategory.NONE``).

    Example:
        Type.of(5)              # Type(PRIMITIVE, int), renders as "int"
        Type.of([])             # Type(NAMED_CLASS, list), renders as "list"
        Type.of(int)            # Type(CLASS, int), renders as "type[int]"
        Type.named_class(dict)  # the key used to register a mapper for dicts
    """

    category: TypeCategory
    cls: type | None = None

    NONE: ClassVar[Type]

    @classmethod
    def of(cls, value: Any) -> Type:
        """Return the type of ``value``."""
        if value is None:
            return cls.NONE
        if isinstance(value, type):
            return cls(TypeCategory.CLASS, value)
        if isinstance(value, _CALLABLE_TYPES):
            return cls(TypeCategory.FUNCTION, type(value))
        return cls.named_class(type(value))

    @classmethod
    def named_class(cls, klass: type) -> Type:
        """Return the type whose instances are exactly of class ``klass``.

        Args:
            klass: A class.

        Returns:
            ``Type.NONE`` for ``NoneType``, a primitive type for built-in
            scalars, otherwise a named class.
        """
        if klass is type(None):
            return cls.NONE
        if klass in _PRIMITIVES:
            return cls(TypeCategory.PRIMITIVE, klass)
        return cls(TypeCategory.NAMED_CLASS, klass)

    def is_primitive(self) -> bool:
        """Check if this type describes ``None`` or a built-in scalar."""
        return self.category in (TypeCategory.NONE, TypeCategory.PRIMITIVE)

    def get_name(self) -> str:
        """Get the human-readable name of the type."""
        if self.category is TypeCategory.NONE or self.cls is None:
            return "None"
        name = self.cls.__qualname__
        if self.category is TypeCategory.CLASS:
            return f"type[{name}]"
        return name

    def __str__(self) -> str:
        return self.get_name()


Type.NONE = Type(TypeCategory.NONE)
