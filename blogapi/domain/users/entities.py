# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class TokenPayload:

    id: str | None
    issued_at: datetime
    expires_at: datetime
