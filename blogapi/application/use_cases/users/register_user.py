# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.application.services.input_validators import validate_email, validate_password
from blogapi.domain.users.entities import User
from blogapi.domain.users.exceptions import UserAlreadyExistsError
from blogapi.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> User:
        existing = self._users.find_by_email(email)
        if existing:
            raise UserAlreadyExistsError()

        validate_email(email)
        validate_password(password)

        hashed = self._password_hasher.hash(password)
        return self._users.create(email, hashed)
