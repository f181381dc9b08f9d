from __future__ import annotations

import pytest
from flask import Flask
from loguru import logger as loguru_logger

from byteblog.app import create_app
from byteblog.infrastructure.container import Container
from byteblog.infrastructure.db import configure_engine, get_engine
from byteblog.shared.config.settings import AppConfig, DatabaseConfig, SecurityConfig
from byteblog.shared.errors import register_error_handler


@pytest.fixture()
def memory_app(reset_database) -> Flask:
    config = AppConfig(
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
        security=SecurityConfig(
            SESSION_BACKEND="memory",
            SESSION_COOKIE_NAME="blog_sid",
            PASSWORD_HASH_COST=10,
        ),
    )
    flask_app = create_app(Container(config))
    flask_app.config.update(TESTING=True)
    yield flask_app
    configure_engine()


def test_app_uses_the_container_database(memory_app: Flask) -> None:
    engine = get_engine()

    assert engine.dialect.name == "sqlite"
    assert engine.url.database is None


def test_in_memory_database_serves_requests(memory_app: Flask) -> None:
    client = memory_app.test_client()

    client.post("/register", data={"username": "alice", "password": "secret123"})
    login = client.post("/login", data={"username": "alice", "password": "secret123"})
    created = client.post("/new-post", data={"title": "Hello", "content": "world"})

    assert login.status_code == 302
    assert client.get_cookie("blog_sid") is not None
    assert client.get_cookie("byteblog_session") is None
    assert created.status_code == 302
    assert [post["title"] for post in client.get("/").get_json()["posts"]] == ["Hello"]
    assert client.get("/health").status_code == 200


@pytest.mark.parametrize(
    ("debug_mode", "expected"),
    [(True, "Unhandled exception: GET /boom"), (False, "Error: RuntimeError on GET /boom")],
)
def test_error_handler_follows_given_debug_flag(debug_mode: bool, expected: str) -> None:
    flask_app = Flask(__name__)
    register_error_handler(flask_app, debug_mode=debug_mode)

    @flask_app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    messages: list[str] = []
    handler_id = loguru_logger.add(messages.append, level="ERROR", format="{message}")
    try:
        response = flask_app.test_client().get("/boom")
    finally:
        loguru_logger.remove(handler_id)

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}
    assert any(expected in message for message in messages)
