"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValueObjectError
    │       ├── SchemaDefinitionError
    │       ├── SchemaMismatchError
    │       ├── MissingFieldsError
    │       ├── UnknownFieldError
    │       ├── NotInitializedError
    │       └── ImmutableError
    └── ApplicationError         (application.py)
        └── ConfigError
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from valueobjects.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from valueobjects.kernel.errors.base import BaseError
from valueobjects.kernel.errors.domain import (
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
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "DomainError",
    "ImmutableError",
    "InvalidSettingValueError",
    "MissingFieldsError",
    "MissingRequiredSettingError",
    "NotInitializedError",
    "SchemaDefinitionError",
    "SchemaMismatchError",
    "UnknownFieldError",
    "ValueObjectError",
]
