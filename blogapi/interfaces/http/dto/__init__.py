# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel

from .auth import LoginUserSchema, RegisterUserSchema
from .posts import CreateUpdatePostSchema

REGISTER_USER = "register-user"
LOGIN_USER = "login-user"
CREATE_UPDATE_POST = "create-update-post"


def request_schemas() -> Mapping[str, type[BaseModel]]:
    return {
        REGISTER_USER: RegisterUserSchema,
        LOGIN_USER: LoginUserSchema,
        CREATE_UPDATE_POST: CreateUpdatePostSchema,
    }


__all__ = [
    "CREATE_UPDATE_POST",
    "CreateUpdatePostSchema",
    "LOGIN_USER",
    "LoginUserSchema",
    "REGISTER_USER",
    "RegisterUserSchema",
    "request_schemas",
]
