# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from blogapi.domain.users.entities import User


@dataclass(slots=True, frozen=True)
class Post:

    id: str
    title: str
    description: str
    owner_id: str
    created_at: datetime
    updated_at: datetime

    def is_owned_by(self, user_id: str | None) -> bool:
        return user_id is not None and self.owner_id == user_id


@dataclass(slots=True, frozen=True)
class PostWithOwner:
    """Post joined with the user that created it."""

    post: Post
    owner: User
