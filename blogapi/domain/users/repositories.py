# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenPayload, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def create(self, email: str, password_hash: str) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, subject_id: str) -> str: ...
    def verify(self, token: str) -> TokenPayload: ...
