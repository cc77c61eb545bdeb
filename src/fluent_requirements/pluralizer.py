"""Singular and plural forms of the element types named in size messages."""

from __future__ import annotations

from enum import Enum

__all__ = ["Pluralizer"]


class Pluralizer(Enum):
    """The noun used to describe the elements of a collection.

    Each member holds ``(prefix, singular suffix, plural suffix)``.

    Example:
        Pluralizer.ELEMENT.name_of(1)  # "element"
        Pluralizer.ENTRY.name_of(3)    # "entries"
    """

    CHARACTER = ("character", "", "s")
    KEY = ("key", "", "s")
    VALUE = ("value", "", "s")
    ELEMENT = ("element", "", "s")
    ENTRY = ("entr", "y", "ies")

    def name_of(self, count: float) -> str:
        """Return the singular or plural noun for ``count`` elements."""
        prefix, singular, plural = self.value
        if count == 1:
            return prefix + singular
        return prefix + plural
