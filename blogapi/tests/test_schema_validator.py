from __future__ import annotations

import pytest

from blogapi.application.services.schema_validator import (
    SchemaValidationError,
    SchemaValidator,
    UnknownSchemaError,
)


def test_validate_strips_undeclared_fields(schema_validator: SchemaValidator) -> None:
    payload = {"email": "a@b.com", "password": "Abc123!@", "isAdmin": True}

    cleaned = schema_validator.validate("register-user", payload)

    assert cleaned == {"email": "a@b.com", "password": "Abc123!@"}
    assert "isAdmin" in payload


def test_missing_field_reports_first_error(schema_validator: SchemaValidator) -> None:
    with pytest.raises(SchemaValidationError) as info:
        schema_validator.validate("register-user", {})

    err = info.value
    assert err.status == 400
    assert err.message == "should have required property 'email'"
    assert [e["path"] for e in err.errors] == ["email", "password"]


def test_wrong_type(schema_validator: SchemaValidator) -> None:
    with pytest.raises(SchemaValidationError) as info:
        schema_validator.validate("login-user", {"email": 42, "password": "x"})

    assert info.value.message == "should be string"


def test_empty_post_title(schema_validator: SchemaValidator) -> None:
    with pytest.raises(SchemaValidationError) as info:
        schema_validator.validate("create-update-post", {"title": "", "description": "d"})

    assert info.value.message == "should NOT be shorter than 1 characters"
    assert info.value.errors[0]["path"] == "title"


def test_non_object_payload(schema_validator: SchemaValidator) -> None:
    with pytest.raises(SchemaValidationError, match="should be object"):
        schema_validator.validate("create-update-post", ["title"])


def test_unknown_schema(schema_validator: SchemaValidator) -> None:
    with pytest.raises(UnknownSchemaError) as info:
        schema_validator.validate("nope", {})

    assert info.value.status == 500


def test_registry_is_read_only(schema_validator: SchemaValidator) -> None:
    assert set(schema_validator.schemas) == {"register-user", "login-user", "create-update-post"}
    with pytest.raises(TypeError):
        schema_validator.schemas["extra"] = object  # type: ignore[index]
