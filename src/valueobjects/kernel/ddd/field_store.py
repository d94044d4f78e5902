"""FieldStore – the write-once mapping backing a single value object."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from valueobjects.kernel.ddd.key_schema import KeySchema
from valueobjects.kernel.errors.domain import (
    MissingFieldsError,
    SchemaMismatchError,
    UnknownFieldError,
)


class FieldStore(Mapping[str, Any]):
    """Read-only ``name -> value`` mapping keyed by a :class:`KeySchema`.

    Build one with :meth:`from_values` (validated, positional) or
    :meth:`from_resolved` (already-validated mapping, no completeness check).
    """

    __slots__ = ("_schema", "_values")

    def __init__(self, schema: KeySchema, values: Mapping[str, Any]) -> None:
        self._schema = schema
        self._values: Mapping[str, Any] = MappingProxyType(
            {key: values[key] for key in schema}
        )

    @classmethod
    def from_values(cls, schema: KeySchema, values: Sequence[Any]) -> "FieldStore":
        """Zip *values* onto *schema* after checking count and completeness."""
        if len(values) != len(schema):
            raise SchemaMismatchError(schema.type_name, len(schema), len(values))
        missing = [key for key, value in zip(schema, values) if value is None]
        if missing:
            raise MissingFieldsError(schema.type_name, missing)
        return cls(schema, dict(zip(schema, values)))

    @classmethod
    def from_resolved(cls, schema: KeySchema, resolved: Mapping[str, Any]) -> "FieldStore":
        """Adopt a mapping resolved by derivation; no completeness check."""
        return cls(schema, resolved)

    @property
    def schema(self) -> KeySchema:
        return self._schema

    def get_field(self, name: str) -> Any:
        if name not in self._schema:
            raise UnknownFieldError(self._schema.type_name, name)
        return self._values[name]

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schema)

    def __len__(self) -> int:
        return len(self._schema)

    def __repr__(self) -> str:
        return f"FieldStore({dict(self._values)!r})"


__all__ = ["FieldStore"]
