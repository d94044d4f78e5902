"""Property-based tests for value-object construction, equality and derivation."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from valueobjects.kernel.ddd import ValueObject, value_object
from valueobjects.kernel.errors import (
    ImmutableError,
    MissingFieldsError,
    SchemaMismatchError,
)


@value_object("a", "b", "c")
class Triple(ValueObject):
    pass


@value_object("a", "b", "c")
class OtherTriple(ValueObject):
    pass


KEYS = ("a", "b", "c")

present = st.one_of(st.integers(), st.text(max_size=5), st.booleans())
maybe_absent = st.one_of(st.none(), present)
triples = st.tuples(present, present, present).map(lambda vals: Triple(*vals))


@given(st.lists(present, max_size=6).filter(lambda vals: len(vals) != 3))
def test_wrong_arity_always_fails(values: list[object]) -> None:
    with pytest.raises(SchemaMismatchError) as exc_info:
        Triple(*values)
    assert exc_info.value.expected == 3
    assert exc_info.value.actual == len(values)


@given(st.tuples(maybe_absent, maybe_absent, maybe_absent).filter(lambda v: None in v))
def test_missing_fields_named_in_schema_order(values: tuple[object, ...]) -> None:
    with pytest.raises(MissingFieldsError) as exc_info:
        Triple(*values)
    assert exc_info.value.fields == tuple(k for k, v in zip(KEYS, values) if v is None)


@given(st.tuples(present, present, present))
def test_equality_reflexive_and_symmetric(values: tuple[object, ...]) -> None:
    a, b = Triple(*values), Triple(*values)
    assert a.eql(a)
    assert a.eql(b)
    assert b.eql(a)


@given(st.tuples(present, present, present))
def test_types_sharing_a_shape_never_equal(values: tuple[object, ...]) -> None:
    assert not Triple(*values).eql(OtherTriple(*values))


@given(triples, st.dictionaries(st.sampled_from(KEYS), present))
def test_derive_applies_overrides_only(source: Triple, overrides: dict[str, object]) -> None:
    before = source.as_dict()
    derived = source.derive(overrides)
    for key in KEYS:
        expected = overrides[key] if key in overrides else before[key]
        assert derived.get(key) == expected
    assert source.as_dict() == before


@given(triples)
def test_derive_without_overrides_equals_source(source: Triple) -> None:
    assert source.derive().eql(source)


@given(triples, st.dictionaries(st.sampled_from(KEYS), present))
def test_set_always_fails(source: Triple, attrs: dict[str, object]) -> None:
    with pytest.raises(ImmutableError):
        source.set(attrs)
