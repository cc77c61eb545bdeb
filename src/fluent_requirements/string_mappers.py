"""Registry of functions that convert values to their string form in failure messages.

Every message and diff renders values through the same ``StringMappers``
instance, so registering a mapper changes how a type appears everywhere.
"""

from __future__ import annotations

import traceback
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Callable

from fluent_requirements.type_info import Type

__all__ = ["MutableStringMappers", "SeenValues", "StringMapper", "StringMappers"]

CYCLE_MARKER = "..."


class SeenValues:
    """Tracks the containers being rendered so that reference cycles terminate.

    Passed to every mapper. Container mappers render their elements through
    ``to_string()`` inside a ``visiting()`` block.
    """

    def __init__(self, mappers: StringMappers) -> None:
        self._mappers = mappers
        self._ids: set[int] = set()

    def to_string(self, value: Any) -> str:
        """Render a nested value using the registry that started the conversion."""
        return self._mappers.to_string(value, self)

    @contextmanager
    def visiting(self, value: Any) -> Iterator[bool]:
        """Mark ``value`` as being rendered.

        Yields:
            False if ``value`` is already being rendered further up the stack.
        """
        key = id(value)
        if key in self._ids:
            yield False
            return
        self._ids.add(key)
        try:
            yield True
        finally:
            self._ids.discard(key)


StringMapper = Callable[[Any, SeenValues], str]


def _string_to_string(value: str, seen: SeenValues) -> str:
    return f'"{value}"'


def _elements_to_string(values: Any, seen: SeenValues, prefix: str, suffix: str) -> str:
    with seen.visiting(values) as first_visit:
        if not first_visit:
            return CYCLE_MARKER
        return prefix + ", ".join(seen.to_string(element) for element in values) + suffix


def _list_to_string(value: list[Any], seen: SeenValues) -> str:
    return _elements_to_string(value, seen, "[", "]")


def _tuple_to_string(value: tuple[Any, ...], seen: SeenValues) -> str:
    if len(value) == 1:
        return _elements_to_string(value, seen, "(", ",)")
    return _elements_to_string(value, seen, "(", ")")


def _set_to_string(value: set[Any] | frozenset[Any], seen: SeenValues) -> str:
    if not value:
        return f"{type(value).__name__}()"
    return _elements_to_string(value, seen, "{", "}")


def _mapping_to_string(value: Mapping[Any, Any], seen: SeenValues) -> str:
    with seen.visiting(value) as first_visit:
        if not first_visit:
            return CYCLE_MARKER
        entries = (f"{seen.to_string(k)}: {seen.to_string(v)}" for k, v in value.items())
        return "{" + ", ".join(entries) + "}"


def _exception_to_string(value: BaseException, seen: SeenValues) -> str:
    if value.__traceback__ is None:
        return f"{type(value).__qualname__}: {value}"
    return "".join(traceback.format_exception(value)).rstrip("\n")


def _type_to_string(value: Type, seen: SeenValues) -> str:
    return value.get_name()


def _class_to_string(value: type, seen: SeenValues) -> str:
    return Type.of(value).get_name()


class StringMappers:
    """Immutable mapping from a ``Type`` to the function that renders its values.

    Lookups walk the value's class hierarchy (MRO), so a mapper registered for
    a base class also applies to its subclasses unless they register their own.
    Values without a mapper are rendered with ``str()``.

    Example:
        mappers = StringMappers.default().with_mapper(
            Type.named_class(Decimal), lambda value, seen: f"{value:.2f}"
        )
        mappers.to_string(Decimal("1.5"))  # "1.50"
    """

    _DEFAULT: StringMappers | None = None

    def __init__(self, mappers: Mapping[Type, StringMapper] | None = None) -> None:
        """Initialize the registry.

        Args:
            mappers: The type-to-mapper entries. Copied; later changes to the
                argument are not reflected.
        """
        self._mappers: Mapping[Type, StringMapper] = MappingProxyType(dict(mappers or {}))

    @classmethod
    def default(cls) -> StringMappers:
        """Get the registry of built-in mappers."""
        if cls._DEFAULT is None:
            cls._DEFAULT = cls(
                {
                    Type.named_class(str): _string_to_string,
                    Type.named_class(list): _list_to_string,
                    Type.named_class(tuple): _tuple_to_string,
                    Type.named_class(set): _set_to_string,
                    Type.named_class(frozenset): _set_to_string,
                    Type.named_class(Mapping): _mapping_to_string,
                    Type.named_class(BaseException): _exception_to_string,
                    Type.named_class(Type): _type_to_string,
                    Type.named_class(type): _class_to_string,
                }
            )
        return cls._DEFAULT

    def get_mapper(self, type_: Type) -> StringMapper | None:
        """Get the mapper registered for exactly ``type_``, if any."""
        return self._mappers.get(type_)

    def with_mapper(self, type_: Type, mapper: StringMapper) -> StringMappers:
        """Return a copy of this registry with ``mapper`` registered for ``type_``."""
        if not callable(mapper):
            raise TypeError(f"mapper must be callable.\nactual: {mapper!r}")
        updated = dict(self._mappers)
        updated[type_] = mapper
        return StringMappers(updated)

    def without_mapper(self, type_: Type) -> StringMappers:
        """Return a copy of this registry without a mapper for ``type_``."""
        if type_ not in self._mappers:
            return self
        updated = dict(self._mappers)
        del updated[type_]
        return StringMappers(updated)

    def to_string(self, value: Any, seen: SeenValues | None = None) -> str:
        """Render ``value`` as a string.

        Args:
            value: The value to render.
            seen: The containers already being rendered. Omit for top-level calls.

        Returns:
            The string form of the value.
        """
        if seen is None:
            seen = SeenValues(self)
        for klass in type(value).__mro__:
            mapper = self._mappers.get(Type.named_class(klass))
            if mapper is not None:
                return mapper(value, seen)
        # Mapping is an ABC and never appears in a concrete MRO
        if isinstance(value, Mapping):
            mapper = self._mappers.get(Type.named_class(Mapping))
            if mapper is not None:
                return mapper(value, seen)
        return str(value)

    def to_mutable(self) -> MutableStringMappers:
        """Return a mutable copy of this registry."""
        return MutableStringMappers(dict(self._mappers))

    def __len__(self) -> int:
        return len(self._mappers)

    def __contains__(self, type_: object) -> bool:
        return type_ in self._mappers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringMappers):
            return NotImplemented
        return dict(self._mappers) == dict(other._mappers)

    def __hash__(self) -> int:
        return hash(frozenset(self._mappers.items()))

    def __repr__(self) -> str:
        names = ", ".join(type_.get_name() for type_ in self._mappers)
        return f"StringMappers([{names}])"


class MutableStringMappers:
    """Mutable builder for ``StringMappers``, used inside a configuration update."""

    def __init__(self, mappers: dict[Type, StringMapper]) -> None:
        self._mappers = mappers

    def put(self, type_: Type, mapper: StringMapper) -> MutableStringMappers:
        """Register ``mapper`` for ``type_``.

        Returns:
            Self for method chaining.
        """
        if not callable(mapper):
            raise TypeError(f"mapper must be callable.\nactual: {mapper!r}")
        self._mappers[type_] = mapper
        return self

    def remove(self, type_: Type) -> MutableStringMappers:
        """Remove the mapper registered for ``type_``, if any.

        Returns:
            Self for method chaining.
        """
        self._mappers.pop(type_, None)
        return self

    def to_immutable(self) -> StringMappers:
        """Return an immutable snapshot of the registered mappers."""
        return StringMappers(self._mappers)
