"""Domain errors – value-object contract violations."""

from __future__ import annotations

from collections.abc import Sequence

from valueobjects.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class ValueObjectError(DomainError):
    """Base for every failure raised by the value-object capability."""

    default_code = "value_object_error"

    def __init__(self, type_name: str, message: str) -> None:
        super().__init__(message, detail={"type": type_name})
        self.type_name = type_name


class SchemaDefinitionError(ValueObjectError):
    """A Key Schema is malformed or was never registered."""

    default_code = "schema_definition"


class SchemaMismatchError(ValueObjectError):
    """Constructor received a different number of values than the schema has."""

    default_code = "schema_mismatch"

    def __init__(self, type_name: str, expected: int, actual: int) -> None:
        super().__init__(
            type_name,
            f"Wrong number of fields, {type_name} expected {expected} got {actual}",
        )
        self.expected = expected
        self.actual = actual
        self.detail.update(expected=expected, actual=actual)


class MissingFieldsError(ValueObjectError):
    """One or more fields were absent at construction.

    ``fields`` lists the missing names in Key Schema order.
    """

    default_code = "missing_fields"

    def __init__(self, type_name: str, fields: Sequence[str]) -> None:
        super().__init__(type_name, f"{type_name} is missing fields: {', '.join(fields)}")
        self.fields: tuple[str, ...] = tuple(fields)
        self.detail["fields"] = list(self.fields)


class UnknownFieldError(ValueObjectError):
    default_code = "unknown_field"

    def __init__(self, type_name: str, field: str) -> None:
        super().__init__(type_name, f"{type_name} does not have field {field!r}")
        self.field = field
        self.detail["field"] = field


class NotInitializedError(ValueObjectError):
    default_code = "not_initialized"

    def __init__(self, type_name: str) -> None:
        super().__init__(
            type_name,
            f"{type_name} has no fields yet; call check() before using get()",
        )


class ImmutableError(ValueObjectError):
    """Mutation attempted on a constructed value object."""

    default_code = "immutable"

    def __init__(self, type_name: str) -> None:
        super().__init__(
            type_name,
            f"{type_name} is a value object - it can't be changed. "
            "Instead, use derive() to base a new value on this one",
        )


__all__ = [
    "DomainError",
    "ImmutableError",
    "MissingFieldsError",
    "NotInitializedError",
    "SchemaDefinitionError",
    "SchemaMismatchError",
    "UnknownFieldError",
    "ValueObjectError",
]
