# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from blogapi.shared.config import DatabaseConfig
from blogapi.shared.logging import logger

SessionFactory = Callable[[], Session]


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_config(config: DatabaseConfig) -> Engine:
    connect_args: dict[str, object] = {}
    pool_kwargs: dict[str, object] = {}
    if config.url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
    else:
        pool_kwargs = {
            "pool_size": config.pool_size,
            "max_overflow": config.max_overflow,
            "pool_timeout": config.pool_timeout,
        }

    engine = create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
        **pool_kwargs,
    )
    if config.url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@contextmanager
def unit_of_work_scope(session_factory: SessionFactory) -> Iterator[Session]:
    session = session_factory()
    logger.debug("db.session: opened session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed session")
    except IntegrityError as exc:
        # statement parameters stay out of the log
        logger.warning(f"db.session: integrity error, rolling back: {exc.orig}")
        session.rollback()
        raise
    except Exception:
        logger.exception("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    # models must be imported so their tables are on Base.metadata
    from blogapi.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
