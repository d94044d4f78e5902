"""Capability interfaces consumed by value-object equality.

Types opt in explicitly, by subclassing or ``Equatable.register(cls)``;
nothing is inferred from method presence.
"""

from __future__ import annotations

import abc
from typing import Any


class Equatable(abc.ABC):
    """Anything that defines its own value equality via ``eql``."""

    @abc.abstractmethod
    def eql(self, other: Any) -> bool: ...


class FieldAccess(Equatable):
    """Equatable object whose state is readable field by field."""

    @abc.abstractmethod
    def get(self, field: str) -> Any: ...


def values_equal(left: Any, right: Any) -> bool:
    """Compare two field values one level deep.

    Delegates to ``left.eql(right)`` when *left* declares :class:`Equatable`,
    otherwise falls back to ``==``.
    """
    if isinstance(left, Equatable):
        return left.eql(right)
    return left is right or bool(left == right)


__all__ = ["Equatable", "FieldAccess", "values_equal"]
