"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from valueobjects.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigError,
    DomainError,
    ImmutableError,
    InvalidSettingValueError,
    MissingFieldsError,
    MissingRequiredSettingError,
    NotInitializedError,
    SchemaDefinitionError,
    SchemaMismatchError,
    UnknownFieldError,
    ValueObjectError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestValueObjectErrors:
    @pytest.mark.parametrize(
        "err, code",
        [
            (SchemaDefinitionError("Period", "bad"), "schema_definition"),
            (SchemaMismatchError("Period", 2, 1), "schema_mismatch"),
            (MissingFieldsError("Period", ["end"]), "missing_fields"),
            (UnknownFieldError("Period", "middle"), "unknown_field"),
            (NotInitializedError("Period"), "not_initialized"),
            (ImmutableError("Period"), "immutable"),
        ],
    )
    def test_codes_and_hierarchy(self, err: ValueObjectError, code: str) -> None:
        assert err.code == code
        assert isinstance(err, ValueObjectError)
        assert isinstance(err, DomainError)
        assert err.type_name == "Period"
        assert err.detail["type"] == "Period"

    def test_schema_mismatch_detail(self) -> None:
        err = SchemaMismatchError("Period", 2, 1)
        assert err.message == "Wrong number of fields, Period expected 2 got 1"
        assert err.to_dict()["detail"] == {"type": "Period", "expected": 2, "actual": 1}

    def test_missing_fields_lists_names(self) -> None:
        err = MissingFieldsError("Period", ["start", "end"])
        assert err.fields == ("start", "end")
        assert err.message == "Period is missing fields: start, end"
        assert err.detail["fields"] == ["start", "end"]

    def test_unknown_field_detail(self) -> None:
        err = UnknownFieldError("Period", "middle")
        assert err.field == "middle"
        assert "does not have field 'middle'" in err.message

    def test_immutable_suggests_derive(self) -> None:
        assert "use derive()" in ImmutableError("Period").message


class TestConfigErrors:
    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("VALUES_LOG_LEVEL")
        assert isinstance(err, ConfigError)
        assert isinstance(err, ApplicationError)
        assert err.setting_name == "VALUES_LOG_LEVEL"
        assert "VALUES_LOG_LEVEL" in err.message

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "unknown log level")
        assert err.value == "LOUD"
        assert err.reason == "unknown log level"
        assert err.code == "invalid_setting_value"
