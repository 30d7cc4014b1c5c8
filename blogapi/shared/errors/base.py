# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    message: str
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}


class ValidationError(AppError):
    def __init__(
        self, message: str = "Validation failed.", *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(message=message, status=HTTPStatus.BAD_REQUEST, context=context)


class AuthError(AppError):
    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message=message, status=HTTPStatus.FORBIDDEN)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found.") -> None:
        super().__init__(message=message, status=HTTPStatus.NOT_FOUND)


class ConflictError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, status=HTTPStatus.UNPROCESSABLE_ENTITY)


class InvalidIdentifierError(NotFoundError):
    """Lookup by an id that cannot be a stored identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__("Not defined.")
        self.context = {"identifier": identifier}


class HashingError(AppError):
    def __init__(self, message: str = "Password hashing failed.") -> None:
        super().__init__(message=message, status=HTTPStatus.INTERNAL_SERVER_ERROR)
