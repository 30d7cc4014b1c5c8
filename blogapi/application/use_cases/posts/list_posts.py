# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.posts.entities import PostWithOwner
from blogapi.domain.posts.repositories import PostRepository


class ListPostsUseCase:
    """Every post the caller owns, each joined with its owner."""

    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, caller_id: str) -> list[PostWithOwner]:
        return [row for row in self._posts.get_all() if row.post.is_owned_by(caller_id)]
