"""Kernel – 100% framework-agnostic building blocks."""

from valueobjects.kernel.ddd import (
    Entity,
    Equatable,
    FieldAccess,
    ValueObject,
    register_keys,
    value_object,
)
from valueobjects.kernel.errors import (
    BaseError,
    DomainError,
    ImmutableError,
    MissingFieldsError,
    NotInitializedError,
    SchemaDefinitionError,
    SchemaMismatchError,
    UnknownFieldError,
    ValueObjectError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "Entity",
    "Equatable",
    "FieldAccess",
    "ImmutableError",
    "MissingFieldsError",
    "NotInitializedError",
    "SchemaDefinitionError",
    "SchemaMismatchError",
    "UnknownFieldError",
    "ValueObject",
    "ValueObjectError",
    "register_keys",
    "value_object",
]
