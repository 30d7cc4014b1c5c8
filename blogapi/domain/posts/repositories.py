# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post, PostWithOwner


class PostRepository(Protocol):
    def create(self, title: str, description: str, owner_id: str) -> Post: ...
    def get_by_id(self, post_id: str) -> Post | None: ...
    def get_all(self) -> Sequence[PostWithOwner]: ...
    def update(self, title: str, description: str, post_id: str) -> Post | None: ...
    def delete(self, post_id: str) -> None: ...
