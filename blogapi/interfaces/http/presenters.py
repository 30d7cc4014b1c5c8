# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from blogapi.domain.posts.entities import Post, PostWithOwner
from blogapi.domain.users.entities import User


def isoformat(value: datetime) -> str:
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def present_user(user: User) -> dict[str, Any]:
    return {
        "userId": user.id,
        "email": user.email,
        "created": isoformat(user.created_at),
    }


def present_post(post: Post) -> dict[str, Any]:
    return {
        "id": post.id,
        "title": post.title,
        "description": post.description,
        "ownerId": post.owner_id,
        "created": isoformat(post.created_at),
        "updated": isoformat(post.updated_at),
    }


def present_posts_with_owner(rows: Iterable[PostWithOwner]) -> list[dict[str, Any]]:
    return [
        {
            "id": row.post.id,
            "title": row.post.title,
            "description": row.post.description,
            "owner": {
                "id": row.owner.id,
                "email": row.owner.email,
                "created": isoformat(row.owner.created_at),
                "updated": isoformat(row.owner.updated_at),
            },
            "created": isoformat(row.post.created_at),
            "updated": isoformat(row.post.updated_at),
        }
        for row in rows
    ]
