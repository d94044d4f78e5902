"""DDD building blocks – public re-export surface."""

from valueobjects.kernel.ddd.capability import Equatable, FieldAccess, values_equal
from valueobjects.kernel.ddd.entity import Entity, install_model_eql, model_eql, model_hash
from valueobjects.kernel.ddd.field_store import FieldStore
from valueobjects.kernel.ddd.key_schema import KeySchema
from valueobjects.kernel.ddd.value_object import (
    ValueObject,
    ValueObjectCore,
    register_keys,
    value_object,
)

__all__ = [
    "Entity",
    "Equatable",
    "FieldAccess",
    "FieldStore",
    "KeySchema",
    "ValueObject",
    "ValueObjectCore",
    "install_model_eql",
    "model_eql",
    "model_hash",
    "register_keys",
    "value_object",
    "values_equal",
]
