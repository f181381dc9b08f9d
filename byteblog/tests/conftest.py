from __future__ import annotations

import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from threading import Lock

_TMP_DIR = Path(tempfile.mkdtemp(prefix="byteblog-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["LOG_FILE"] = str(_TMP_DIR / "test.log")
os.environ.setdefault("PASSWORD_HASH_COST", "10")
os.environ.setdefault("SESSION_BACKEND", "database")

import pytest  # noqa: E402
from flask import Flask  # noqa: E402

from byteblog.domain.users.entities import User  # noqa: E402
from byteblog.domain.users.exceptions import DuplicateUsernameError  # noqa: E402
from byteblog.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402
from byteblog.infrastructure.db import Base, get_engine  # noqa: E402
from byteblog.infrastructure.db import models  # noqa: E402,F401


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self._lock = Lock()

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def create_user(self, username: str, password_hash: str) -> User:
        with self._lock:
            if username in self._users:
                raise DuplicateUsernameError()
            user = User(
                id=self._seq,
                username=username,
                password_hash=password_hash,
                created_at=datetime.now(UTC),
            )
            self._seq += 1
            self._users[username] = user
            return user


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def reset_database():
    Base.metadata.drop_all(bind=get_engine())
    Base.metadata.create_all(bind=get_engine())
    yield
    Base.metadata.drop_all(bind=get_engine())


@pytest.fixture()
def app(reset_database) -> Flask:
    from byteblog.app import create_app

    flask_app = create_app()
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()
