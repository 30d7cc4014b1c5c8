# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.shared.errors.base import ConflictError


class UserAlreadyExistsError(ConflictError):
    def __init__(self) -> None:
        super().__init__("User already exists.")


class UserNotFoundError(ConflictError):
    def __init__(self) -> None:
        super().__init__("User was not found.")


class InvalidPasswordError(ConflictError):
    def __init__(self) -> None:
        super().__init__("Password is invalid.")


class MissingIdentityError(ConflictError):
    def __init__(self) -> None:
        super().__init__("User was not defined.")
