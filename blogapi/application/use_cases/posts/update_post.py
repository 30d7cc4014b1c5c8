# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from blogapi.application.services.schema_validator import SchemaValidator
from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.exceptions import PostNotFoundError
from blogapi.domain.posts.repositories import PostRepository

from .authorize_owner import load_owned_post


class UpdatePostUseCase:
    """Overwrite title and description of a post the caller owns.

    Ownership is settled before the body is validated, so a non-owner gets
    422 whatever the payload looks like.
    """

    def __init__(
        self,
        *,
        posts: PostRepository,
        schema_validator: SchemaValidator,
        schema_name: str,
    ) -> None:
        self._posts = posts
        self._schema_validator = schema_validator
        self._schema_name = schema_name

    def execute(self, caller_id: str, post_id: str, payload: Mapping[str, Any] | None) -> Post:
        load_owned_post(self._posts, caller_id, post_id)

        data = self._schema_validator.validate(self._schema_name, payload)

        updated = self._posts.update(data["title"], data["description"], post_id)
        if updated is None:
            # deleted between the ownership check and the write
            raise PostNotFoundError(post_id)
        return updated
