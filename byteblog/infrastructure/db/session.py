# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from byteblog.shared.config import load_config
from byteblog.shared.config.settings import DatabaseConfig
from byteblog.shared.logging import logger


class Base(DeclarativeBase):
    pass


SessionLocal = scoped_session(
    sessionmaker(autoflush=False, autocommit=False, expire_on_commit=False)
)

_engine: Engine | None = None


def _set_sqlite_pragmas(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


def _engine_kwargs(database: DatabaseConfig) -> dict[str, Any]:
    url = make_url(database.url)
    kwargs: dict[str, Any] = {"echo": False, "pool_pre_ping": True}

    if url.get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
            pool_timeout=database.pool_timeout,
        )
        return kwargs

    kwargs["connect_args"] = {
        "check_same_thread": False,
        "timeout": int(database.pool_timeout),
    }
    if url.database in (None, "", ":memory:"):
        # one shared connection, otherwise every thread sees its own empty database
        kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
            pool_timeout=database.pool_timeout,
        )
    return kwargs


def configure_engine(database: DatabaseConfig | None = None) -> Engine:
    """Builds the engine for ``database`` and binds ``SessionLocal`` to it."""
    global _engine

    database = database or load_config().database
    engine = create_engine(database.url, **_engine_kwargs(database))
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _set_sqlite_pragmas)

    if _engine is not None:
        SessionLocal.remove()
        _engine.dispose()
    _engine = engine
    SessionLocal.configure(bind=engine)
    logger.debug(f"db.engine: configured {engine.url!r}")
    return engine


def get_engine() -> Engine:
    return _engine if _engine is not None else configure_engine()


@contextmanager
def session_scope() -> Iterator[Session]:
    get_engine()
    session = SessionLocal()
    logger.debug("db.session: opened scoped session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed scoped session")
    except Exception:
        logger.debug("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()
        logger.debug("db.session: closed scoped session")


def init_db(database: DatabaseConfig | None = None) -> None:
    from . import models  # noqa: F401

    engine = configure_engine(database) if database is not None else get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
