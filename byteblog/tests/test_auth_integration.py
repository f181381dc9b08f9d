from __future__ import annotations

from byteblog.infrastructure.db import SessionLocal
from byteblog.infrastructure.db.models import SessionRecord, User

COOKIE = "byteblog_session"


def test_register_login_logout_flow(client) -> None:
    register = client.post("/register", data={"username": "alice", "password": "secret123"})
    assert register.status_code == 302
    assert register.headers["Location"] == "/login"
    assert client.get_cookie(COOKIE) is None

    duplicate = client.post("/register", data={"username": "alice", "password": "other"})
    assert duplicate.status_code == 409
    assert duplicate.get_json()["error"] == "username_taken"

    wrong = client.post("/login", data={"username": "alice", "password": "wrong"})
    assert wrong.status_code == 401
    assert wrong.get_json()["message"] == "Invalid username or password"
    assert client.get_cookie(COOKIE) is None

    login = client.post("/login", data={"username": "alice", "password": "secret123"})
    assert login.status_code == 302
    assert login.headers["Location"] == "/"
    set_cookie = login.headers["Set-Cookie"]
    assert set_cookie.startswith(f"{COOKIE}=")
    assert "HttpOnly" in set_cookie
    assert "SameSite=Lax" in set_cookie
    assert client.get_cookie(COOKIE) is not None

    created = client.post("/new-post", data={"title": "Hello", "content": "World"})
    assert created.status_code == 302
    assert created.headers["Location"] == "/"

    logout = client.get("/logout")
    assert logout.status_code == 302
    assert logout.headers["Location"] == "/login"
    assert client.get_cookie(COOKIE) is None

    denied = client.post("/new-post", data={"title": "Again", "content": "Nope"})
    assert denied.status_code == 302
    assert denied.headers["Location"] == "/login"
    assert len(client.get("/").get_json()["posts"]) == 1

    session = SessionLocal()
    try:
        assert session.query(User).count() == 1
        assert session.query(SessionRecord).count() == 0
    finally:
        session.close()


def test_login_failures_are_byte_identical(client) -> None:
    client.post("/register", json={"username": "alice", "password": "secret123"})

    unknown = client.post("/login", json={"username": "nobody", "password": "secret123"})
    wrong = client.post("/login", json={"username": "alice", "password": "not-it"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_data() == wrong.get_data()


def test_register_requires_both_fields(client) -> None:
    response = client.post("/register", data={"username": "   ", "password": "secret123"})

    assert response.status_code == 422
    assert response.get_json() == {
        "error": "username_and_password_required",
        "message": "Username and password are required",
    }


def test_register_rejects_non_string_payload(client) -> None:
    response = client.post("/register", json={"username": ["alice"], "password": 5})

    assert response.status_code == 422
    assert response.get_json()["error"] == "validation_error"


def test_logout_without_session_still_redirects(client) -> None:
    client.set_cookie(COOKIE, "already-gone-token")

    response = client.get("/logout")

    assert response.status_code == 302
    assert response.headers["Location"] == "/login"
    assert client.get_cookie(COOKIE) is None


def test_forged_cookie_is_denied(client) -> None:
    client.set_cookie(COOKIE, "forged-token-value")

    response = client.post("/post/delete/1")

    assert response.status_code == 302
    assert response.headers["Location"] == "/login"


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"
