from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from blogapi.application.services.schema_validator import SchemaValidator
from blogapi.application.services.token_service import JwtTokenService
from blogapi.domain.posts.entities import Post, PostWithOwner
from blogapi.domain.posts.repositories import PostRepository
from blogapi.domain.users.entities import User
from blogapi.domain.users.repositories import PasswordHasher, UserRepository
from blogapi.infrastructure.repositories.identifiers import ensure_identifier
from blogapi.interfaces.http.dto import request_schemas

TEST_SECRET = "test-signing-secret-that-is-long-enough-for-hs256"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def create(self, email: str, password_hash: str) -> User:
        now = datetime.now(UTC)
        user = User(
            id=uuid.uuid4().hex,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self._users[user.id] = user
        return user


class InMemoryPostRepository(PostRepository):
    def __init__(self, users: InMemoryUserRepository) -> None:
        self._users = users
        self._posts: dict[str, Post] = {}

    def create(self, title: str, description: str, owner_id: str) -> Post:
        now = datetime.now(UTC)
        post = Post(
            id=uuid.uuid4().hex,
            title=title,
            description=description,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        self._posts[post.id] = post
        return post

    def get_by_id(self, post_id: str) -> Post | None:
        return self._posts.get(ensure_identifier(post_id))

    def get_all(self) -> Sequence[PostWithOwner]:
        return [
            PostWithOwner(post=post, owner=self._users._users[post.owner_id])
            for post in self._posts.values()
        ]

    def update(self, title: str, description: str, post_id: str) -> Post | None:
        post = self._posts.get(ensure_identifier(post_id))
        if post is None:
            return None
        updated = replace(
            post, title=title, description=description, updated_at=datetime.now(UTC)
        )
        self._posts[post_id] = updated
        return updated

    def delete(self, post_id: str) -> None:
        self._posts.pop(ensure_identifier(post_id), None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def posts(users: InMemoryUserRepository) -> InMemoryPostRepository:
    return InMemoryPostRepository(users)


@pytest.fixture()
def token_service() -> JwtTokenService:
    return JwtTokenService(secret=TEST_SECRET)


@pytest.fixture()
def schema_validator() -> SchemaValidator:
    return SchemaValidator(request_schemas())


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()
