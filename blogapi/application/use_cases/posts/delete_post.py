# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.posts.repositories import PostRepository

from .authorize_owner import load_owned_post


class DeletePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, caller_id: str, post_id: str) -> None:
        load_owned_post(self._posts, caller_id, post_id)
        self._posts.delete(post_id)
