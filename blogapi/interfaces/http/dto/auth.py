# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RegisterUserSchema(BaseModel):
    # Format rules live in the input validators so that they report their own messages.
    email: str
    password: str

    model_config = ConfigDict(extra="ignore")


class LoginUserSchema(BaseModel):
    email: str
    password: str

    model_config = ConfigDict(extra="ignore")
