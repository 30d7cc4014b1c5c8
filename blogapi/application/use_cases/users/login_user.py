# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.users.exceptions import InvalidPasswordError, UserNotFoundError
from blogapi.domain.users.repositories import PasswordHasher, TokenService, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> str:
        user = self._users.find_by_email(email)
        if not user:
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidPasswordError()

        return self._tokens.issue(user.id)
