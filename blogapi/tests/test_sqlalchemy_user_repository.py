from __future__ import annotations

from pathlib import Path

import pytest

from blogapi.domain.users.exceptions import UserAlreadyExistsError
from blogapi.infrastructure.db import create_engine_from_config, create_session_factory, init_db
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from blogapi.shared.config import DatabaseConfig


@pytest.fixture()
def user_repository(tmp_path: Path) -> SqlAlchemyUserRepository:
    engine = create_engine_from_config(DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'users.db'}"))
    init_db(engine)
    return SqlAlchemyUserRepository(create_session_factory(engine))


def test_create_and_find_by_email(user_repository: SqlAlchemyUserRepository) -> None:
    created = user_repository.create("a@b.com", "scrypt:hash")

    found = user_repository.find_by_email("a@b.com")

    assert found == created
    assert len(created.id) == 32
    assert created.created_at.tzinfo is not None
    assert user_repository.find_by_email("missing@b.com") is None


def test_duplicate_email_is_a_conflict_without_leaking_the_row(
    user_repository: SqlAlchemyUserRepository,
) -> None:
    user_repository.create("a@b.com", "scrypt:SECRETHASH")

    with pytest.raises(UserAlreadyExistsError) as info:
        user_repository.create("a@b.com", "scrypt:SECRETHASH")

    assert info.value.status == 422
    assert info.value.to_dict() == {"success": False, "message": "User already exists."}
    assert "SECRETHASH" not in str(info.value)
    assert info.value.__cause__ is None
