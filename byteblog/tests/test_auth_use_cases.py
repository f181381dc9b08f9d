from __future__ import annotations

import pytest
from loguru import logger as loguru_logger

from byteblog.application.services.sessions import SessionManager
from byteblog.application.use_cases.users.login_user import LoginUserUseCase
from byteblog.application.use_cases.users.logout_user import LogoutUserUseCase
from byteblog.application.use_cases.users.register_user import RegisterUserUseCase
from byteblog.domain.users.exceptions import (
    AuthServiceError,
    DuplicateUsernameError,
    InvalidCredentialsError,
)
from byteblog.infrastructure.sessions.memory_store import InMemorySessionStore
from byteblog.shared.errors import HashError, StoreUnavailableError, ValidationError


class FailingHasher:
    def hash(self, password: str) -> str:
        raise HashError("boom")

    def verify(self, password: str, hashed: str) -> bool:
        raise HashError("boom")


class UnavailableStore(InMemorySessionStore):
    def delete(self, token: str) -> None:
        raise StoreUnavailableError("session_delete")


@pytest.fixture()
def sessions() -> SessionManager:
    return SessionManager(InMemorySessionStore())


def test_register_user_success(users, hasher) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=hasher)

    user = use_case.execute("alice", "secret123")

    assert user.username == "alice"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_username("alice") is not None


def test_register_user_duplicate_raises(users, hasher) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=hasher)
    use_case.execute("alice", "secret123")

    with pytest.raises(DuplicateUsernameError):
        use_case.execute("alice", "other")

    assert users.find_by_username("alice").password_hash == "hashed:secret123"


@pytest.mark.parametrize("username,password", [("", "secret123"), ("alice", ""), ("", "")])
def test_register_rejects_empty_fields(users, hasher, username: str, password: str) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=hasher)

    with pytest.raises(ValidationError):
        use_case.execute(username, password)

    assert users.find_by_username(username) is None


def test_register_hides_hasher_failure(users) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=FailingHasher())

    with pytest.raises(AuthServiceError) as excinfo:
        use_case.execute("alice", "secret123")

    assert excinfo.value.to_dict() == {
        "error": "internal_error",
        "message": "Something went wrong, please try again",
    }


def test_login_user_success(users, hasher, sessions: SessionManager) -> None:
    RegisterUserUseCase(users=users, password_hasher=hasher).execute("alice", "secret123")
    login = LoginUserUseCase(users=users, sessions=sessions, password_hasher=hasher)

    token = login.execute("alice", "secret123")

    assert sessions.resolve(token) == users.find_by_username("alice").id


def test_login_failures_are_indistinguishable(users, hasher, sessions: SessionManager) -> None:
    RegisterUserUseCase(users=users, password_hasher=hasher).execute("alice", "secret123")
    login = LoginUserUseCase(users=users, sessions=sessions, password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("mallory", "secret123")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()
    assert wrong_password.value.to_dict()["message"] == "Invalid username or password"


def test_login_is_case_sensitive(users, hasher, sessions: SessionManager) -> None:
    RegisterUserUseCase(users=users, password_hasher=hasher).execute("alice", "secret123")
    login = LoginUserUseCase(users=users, sessions=sessions, password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError):
        login.execute("Alice", "secret123")


def test_login_hides_hasher_failure(users, sessions: SessionManager) -> None:
    users.create_user("alice", "whatever")
    login = LoginUserUseCase(users=users, sessions=sessions, password_hasher=FailingHasher())

    with pytest.raises(AuthServiceError):
        login.execute("alice", "secret123")


def test_logout_user_removes_session(users, hasher, sessions: SessionManager) -> None:
    RegisterUserUseCase(users=users, password_hasher=hasher).execute("alice", "secret123")
    token = LoginUserUseCase(users=users, sessions=sessions, password_hasher=hasher).execute(
        "alice", "secret123"
    )
    logout = LogoutUserUseCase(sessions=sessions)

    logout.execute(token)
    logout.execute(token)
    logout.execute(None)

    assert sessions.resolve(token) is None


def test_logout_survives_store_failure() -> None:
    store = UnavailableStore()
    sessions = SessionManager(store)
    token = sessions.create(1)
    messages: list[str] = []
    handler_id = loguru_logger.add(messages.append, level="ERROR", format="{message}")

    try:
        LogoutUserUseCase(sessions=sessions).execute(token)
    finally:
        loguru_logger.remove(handler_id)

    assert len(store) == 1
    assert sessions.resolve(token) == 1
    assert any("session store unavailable" in message for message in messages)
