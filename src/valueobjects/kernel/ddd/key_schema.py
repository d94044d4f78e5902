"""KeySchema – the ordered field names a value-object type is identified by."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator

from valueobjects.kernel.errors.domain import SchemaDefinitionError


@dataclasses.dataclass(frozen=True, slots=True)
class KeySchema:
    """Immutable, ordered sequence of field names owned by one type.

    Instances share the schema of their type by reference; re-registering a
    type swaps in a new ``KeySchema`` and leaves the old one untouched.
    """

    type_name: str
    keys: tuple[str, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for key in self.keys:
            if not isinstance(key, str) or not key.isidentifier():
                raise SchemaDefinitionError(
                    self.type_name, f"{self.type_name} has an invalid field name: {key!r}"
                )
            if key in seen:
                raise SchemaDefinitionError(
                    self.type_name, f"{self.type_name} declares field {key!r} twice"
                )
            seen.add(key)

    @classmethod
    def of(cls, type_name: str, *keys: str) -> "KeySchema":
        return cls(type_name, tuple(keys))

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)

    def __contains__(self, key: object) -> bool:
        return key in self.keys


__all__ = ["KeySchema"]
