# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from blogapi.domain.users.entities import User as DomainUser
from blogapi.domain.users.exceptions import UserAlreadyExistsError
from blogapi.domain.users.repositories import UserRepository
from blogapi.infrastructure.db.models import User
from blogapi.infrastructure.db.session import SessionFactory, unit_of_work_scope
from blogapi.infrastructure.repositories.identifiers import as_utc


def to_domain_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            if not row:
                return None
            return to_domain_user(row)

    def create(self, email: str, password_hash: str) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(email=email, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return to_domain_user(row)
        except IntegrityError:
            # unique index on users.email
            raise UserAlreadyExistsError() from None
