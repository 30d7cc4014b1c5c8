# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts import Post, PostWithOwner
from .users import TokenPayload, User

__all__ = ["Post", "PostWithOwner", "TokenPayload", "User"]
