# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.shared.errors.base import ConflictError, NotFoundError


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: str) -> None:
        super().__init__(f'Post with "{post_id}" id was not found.')


class NotPostOwnerError(ConflictError):
    def __init__(self) -> None:
        super().__init__("You are not post's owner.")
