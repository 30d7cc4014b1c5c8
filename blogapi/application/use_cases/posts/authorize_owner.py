# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.exceptions import NotPostOwnerError, PostNotFoundError
from blogapi.domain.posts.repositories import PostRepository
from blogapi.shared.logging import logger


def load_owned_post(posts: PostRepository, caller_id: str, post_id: str) -> Post:
    """Fetch the target post and make sure ``caller_id`` owns it."""
    post = posts.get_by_id(post_id)
    if post is None:
        raise PostNotFoundError(post_id)

    if not post.is_owned_by(caller_id):
        logger.warning(f"posts.authorize: denied user={caller_id} post={post_id}")
        raise NotPostOwnerError()

    return post
