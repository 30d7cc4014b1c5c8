# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.repositories import PostRepository


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, title: str, description: str, owner_id: str) -> Post:
        return self._posts.create(title, description, owner_id)
