"""ValueObject capability – equality by value, write-once fields, derivation.

A host type opts in by declaring its Key Schema::

    @value_object("start", "end")
    class Period(ValueObject):
        pass

    p = Period(1, 5)
    p.derive(end=10).eql(Period(1, 10))  # True

Derivation resolves the full field mapping up front and hands it straight
to :meth:`ValueObject._from_core`; the positional constructor and its
completeness check are never involved, so nothing is shared between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, ClassVar, Self, TypeVar

from valueobjects.kernel.ddd.capability import FieldAccess, values_equal
from valueobjects.kernel.ddd.field_store import FieldStore
from valueobjects.kernel.ddd.key_schema import KeySchema
from valueobjects.kernel.errors.domain import (
    ImmutableError,
    NotInitializedError,
    SchemaDefinitionError,
)

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="ValueObject")


class ValueObjectCore:
    """Key Schema plus Field Store, embeddable in any host class.

    Host types that cannot inherit from :class:`ValueObject` hold a core and
    delegate ``get`` / ``eql`` / ``derive`` to it.
    """

    __slots__ = ("_store",)

    def __init__(self, store: FieldStore) -> None:
        self._store = store

    @classmethod
    def check(cls, schema: KeySchema, values: Sequence[Any]) -> "ValueObjectCore":
        return cls(FieldStore.from_values(schema, values))

    @classmethod
    def from_fields(cls, schema: KeySchema, resolved: Mapping[str, Any]) -> "ValueObjectCore":
        return cls(FieldStore.from_resolved(schema, resolved))

    @property
    def schema(self) -> KeySchema:
        return self._store.schema

    @property
    def store(self) -> FieldStore:
        return self._store

    def get(self, name: str) -> Any:
        return self._store.get_field(name)

    def values(self) -> tuple[Any, ...]:
        return tuple(self._store[key] for key in self.schema)

    def resolve(self, overrides: Mapping[str, Any]) -> dict[str, Any]:
        """Source fields with every non-``None`` override applied."""
        resolved: dict[str, Any] = {}
        for key in self.schema:
            override = overrides.get(key)
            resolved[key] = self._store[key] if override is None else override
        return resolved

    def derive_fields(self, overrides: Mapping[str, Any]) -> "ValueObjectCore":
        return ValueObjectCore.from_fields(self.schema, self.resolve(overrides))

    def fields_equal(self, other: "ValueObjectCore") -> bool:
        if self.schema != other.schema:
            return False
        return all(values_equal(self.get(key), other.get(key)) for key in self.schema)


def _restore(cls: type[V], schema: KeySchema, fields: dict[str, Any]) -> V:
    return cls._from_core(ValueObjectCore.from_fields(schema, fields))


class ValueObject(FieldAccess):
    """Base class for value objects declared with a Key Schema.

    Instances are built once through :meth:`check` and are immutable
    afterwards; use :meth:`derive` to obtain a modified copy.
    """

    _key_schema: ClassVar[KeySchema | None] = None
    _core: ValueObjectCore | None = None

    def __init_subclass__(cls, keys: Iterable[str] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if keys is not None:
            register_keys(cls, *keys)
        elif cls._key_schema is not None:
            # inherited schema, reported under the subclass's own name
            _reject_shadowed(cls, cls._key_schema.keys)
            cls._key_schema = KeySchema(cls.__name__, cls._key_schema.keys)

    def __init__(self, *values: Any) -> None:
        self.check(values)

    # -- construction ------------------------------------------------------

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        return cls._require_schema().keys

    @classmethod
    def _require_schema(cls) -> KeySchema:
        schema = cls._key_schema
        if schema is None:
            raise SchemaDefinitionError(
                cls.__name__,
                f"{cls.__name__} has no key schema; declare one with "
                "@value_object(...) or keys=(...)",
            )
        return schema

    def check(self, values: Sequence[Any]) -> FieldStore:
        """Validate positional *values* and finalize the Field Store."""
        if self._core is not None:
            raise ImmutableError(type(self).__name__)
        core = ValueObjectCore.check(self._require_schema(), values)
        object.__setattr__(self, "_core", core)
        return core.store

    @classmethod
    def _from_core(cls, core: ValueObjectCore) -> Self:
        """Build an instance around an already-resolved core, skipping ``__init__``."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_core", core)
        return instance

    def _require_core(self) -> ValueObjectCore:
        if self._core is None:
            raise NotInitializedError(type(self).__name__)
        return self._core

    # -- field access ------------------------------------------------------

    def get(self, field: str) -> Any:
        return self._require_core().get(field)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._require_core().store)

    def __getattr__(self, name: str) -> Any:
        core = self._core
        if core is not None and name in core.schema:
            return core.get(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # -- derivation --------------------------------------------------------

    def derive(self, overrides: Mapping[str, Any] | None = None, /, **changes: Any) -> Self:
        """Return a new instance with *overrides* applied over this one's fields.

        ``None`` overrides are ignored, as are keys outside the Key Schema.
        """
        core = self._require_core()
        merged = {**(overrides or {}), **changes}
        unknown = [key for key in merged if key not in core.schema]
        if unknown:
            logger.debug(
                "value_object.derive_ignored type=%s keys=%s", type(self).__name__, unknown
            )
        derived = type(self)._from_core(core.derive_fields(merged))
        logger.debug(
            "value_object.derived type=%s overridden=%s",
            type(self).__name__,
            [key for key in core.schema if merged.get(key) is not None],
        )
        return derived

    # -- equality ----------------------------------------------------------

    def eql(self, other: Any) -> bool:
        if not isinstance(other, FieldAccess) or type(other) is not type(self):
            return False
        if other is self:
            return True
        if self._core is None or other._core is None:
            return False
        return self._core.fields_equal(other._core)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.eql(other)

    def __hash__(self) -> int:
        return hash((type(self), self._require_core().values()))

    # -- immutability ------------------------------------------------------

    def set(self, attrs: Mapping[str, Any] | None = None, /, **changes: Any) -> None:
        raise ImmutableError(type(self).__name__)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._core is not None or name == "_core":
            raise ImmutableError(type(self).__name__)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._core is not None or name == "_core":
            raise ImmutableError(type(self).__name__)
        super().__delattr__(name)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        core = self._require_core()
        return (_restore, (type(self), core.schema, dict(core.store)))

    def __repr__(self) -> str:
        if self._core is None:
            return f"{type(self).__name__}(<unchecked>)"
        fields = ", ".join(f"{key}={value!r}" for key, value in self._core.store.items())
        return f"{type(self).__name__}({fields})"


def _reject_shadowed(cls: type[ValueObject], keys: Iterable[str]) -> None:
    """Fields must not collide with class attributes, or ``vo.<field>`` hides them."""
    shadowed = [key for key in keys if isinstance(key, str) and hasattr(cls, key)]
    if shadowed:
        raise SchemaDefinitionError(
            cls.__name__,
            f"{cls.__name__} field names clash with class attributes: {', '.join(shadowed)}",
        )


def register_keys(cls: type[V], *keys: str) -> type[V]:
    """Install a Key Schema on *cls*; registering again replaces it."""
    if not (isinstance(cls, type) and issubclass(cls, ValueObject)):
        raise TypeError(f"{cls!r} must subclass ValueObject to declare a key schema")
    _reject_shadowed(cls, keys)
    replaced = cls.__dict__.get("_key_schema")
    cls._key_schema = KeySchema.of(cls.__name__, *keys)
    logger.debug(
        "value_object.registered type=%s keys=%s replaced=%s",
        cls.__name__,
        list(keys),
        replaced is not None,
    )
    return cls


def value_object(*keys: str) -> Callable[[type[V]], type[V]]:
    """Class decorator form of :func:`register_keys`."""

    def decorator(cls: type[V]) -> type[V]:
        return register_keys(cls, *keys)

    return decorator


__all__ = ["ValueObject", "ValueObjectCore", "register_keys", "value_object"]
