# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.exceptions import PostNotFoundError
from blogapi.domain.posts.repositories import PostRepository


class GetPostUseCase:
    # Reads by id are not owner-scoped: any authenticated caller may fetch any post.
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str) -> Post:
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
