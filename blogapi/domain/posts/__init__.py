from .entities import Post, PostWithOwner
from .exceptions import NotPostOwnerError, PostNotFoundError
from .repositories import PostRepository

__all__ = [
    "NotPostOwnerError",
    "Post",
    "PostNotFoundError",
    "PostRepository",
    "PostWithOwner",
]
