"""Entity base class and the model-identity adapter for host frameworks."""

from __future__ import annotations

from typing import Any, TypeVar

from valueobjects.kernel.ddd.capability import Equatable

M = TypeVar("M", bound=type)

_MISSING = object()


def model_eql(self: Any, other: Any) -> bool:
    """Host-model identity: same ``id`` and exactly the same concrete type."""
    if other is None or type(other) is not type(self):
        return False
    ident = getattr(self, "id", _MISSING)
    if ident is _MISSING:
        return other is self
    return bool(ident == getattr(other, "id", _MISSING))


def model_hash(self: Any) -> int:
    """Hash consistent with :func:`model_eql`."""
    ident = getattr(self, "id", _MISSING)
    if ident is _MISSING:
        return object.__hash__(self)
    return hash((type(self), ident))


def install_model_eql(model_cls: M) -> M:
    """Give a host framework's base model an ``eql`` based on :func:`model_eql`.

    The model type is registered as :class:`Equatable`, so value objects
    holding model instances compare them by identity rather than ``==``.
    ``__hash__`` is replaced too, keeping equal value objects hash-equal.
    """
    model_cls.eql = model_eql  # type: ignore[attr-defined]
    model_cls.__hash__ = model_hash  # type: ignore[assignment]
    Equatable.register(model_cls)
    return model_cls


class Entity(Equatable):
    """Base entity – equality is identity-based (by ``id``)."""

    def __init__(self, id: Any) -> None:  # noqa: A002
        self._id = id

    @property
    def id(self) -> Any:
        return self._id

    eql = model_eql

    def __eq__(self, other: object) -> bool:
        return self.eql(other)

    __hash__ = model_hash

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r})"


__all__ = ["Entity", "install_model_eql", "model_eql", "model_hash"]
