# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import joinedload

from blogapi.domain.posts.entities import Post as DomainPost
from blogapi.domain.posts.entities import PostWithOwner
from blogapi.domain.posts.repositories import PostRepository
from blogapi.infrastructure.db.models import Post
from blogapi.infrastructure.db.session import SessionFactory, unit_of_work_scope
from blogapi.infrastructure.repositories.identifiers import as_utc, ensure_identifier
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import to_domain_user


def to_domain_post(row: Post) -> DomainPost:
    return DomainPost(
        id=row.id,
        title=row.title,
        description=row.description,
        owner_id=row.owner_id,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def create(self, title: str, description: str, owner_id: str) -> DomainPost:
        with unit_of_work_scope(self._session_factory) as session:
            row = Post(title=title, description=description, owner_id=owner_id)
            session.add(row)
            session.flush()
            session.refresh(row)
            return to_domain_post(row)

    def get_by_id(self, post_id: str) -> DomainPost | None:
        ensure_identifier(post_id)
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Post, post_id)
            if not row:
                return None
            return to_domain_post(row)

    def get_all(self) -> Sequence[PostWithOwner]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.owner))
                .order_by(Post.created_at.asc(), Post.id.asc())
                .all()
            )
            return [
                PostWithOwner(post=to_domain_post(row), owner=to_domain_user(row.owner))
                for row in rows
            ]

    def update(self, title: str, description: str, post_id: str) -> DomainPost | None:
        ensure_identifier(post_id)
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Post, post_id)
            if not row:
                return None
            row.title = title
            row.description = description
            session.flush()
            session.refresh(row)
            return to_domain_post(row)

    def delete(self, post_id: str) -> None:
        ensure_identifier(post_id)
        with unit_of_work_scope(self._session_factory) as session:
            session.query(Post).filter(Post.id == post_id).delete()
