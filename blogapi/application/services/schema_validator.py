# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blogapi.shared.errors import AppError, ValidationError


class SchemaValidationError(ValidationError):
    """Carries the first field message; ``context["errors"]`` holds all of them."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__(errors[0]["message"], context={"errors": errors})

    @property
    def errors(self) -> list[dict[str, str]]:
        return list((self.context or {}).get("errors", []))


class UnknownSchemaError(AppError):
    def __init__(self, schema_name: str) -> None:
        super().__init__(
            message=f'Schema "{schema_name}" is not registered.',
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            context={"schema": schema_name},
        )


def _format_error(error: Mapping[str, Any]) -> dict[str, str]:
    loc = error.get("loc", ())
    path = ".".join(str(part) for part in loc if part is not None)
    error_type = error.get("type", "value_error")
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        message = f"should have required property '{path}'"
    elif error_type == "string_type":
        message = "should be string"
    elif error_type == "string_too_short":
        message = f"should NOT be shorter than {ctx.get('min_length', 1)} characters"
    else:
        message = str(error.get("msg", "is invalid"))

    return {"path": path, "message": message}


class SchemaValidator:
    """Validates request bodies against schemas registered by name.

    The registry is fixed at construction. Fields a schema does not declare
    are dropped from the returned payload.
    """

    def __init__(self, schemas: Mapping[str, type[BaseModel]]) -> None:
        self._schemas: Mapping[str, type[BaseModel]] = MappingProxyType(dict(schemas))

    @property
    def schemas(self) -> Mapping[str, type[BaseModel]]:
        return self._schemas

    def validate(self, schema_name: str, payload: Any) -> dict[str, Any]:
        schema = self._schemas.get(schema_name)
        if schema is None:
            raise UnknownSchemaError(schema_name)

        if not isinstance(payload, Mapping):
            raise SchemaValidationError([{"path": "", "message": "should be object"}])

        try:
            model = schema.model_validate(dict(payload))
        except PydanticValidationError as exc:
            raise SchemaValidationError([_format_error(e) for e in exc.errors()]) from exc

        return model.model_dump()


__all__ = ["SchemaValidationError", "SchemaValidator", "UnknownSchemaError"]
