# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from byteblog.application.services.access_guard import AccessGuard
from byteblog.application.services.password_hashing import WerkzeugPasswordHasher
from byteblog.application.services.sessions import SessionManager
from byteblog.application.use_cases.posts import PostsUseCase
from byteblog.application.use_cases.users.login_user import LoginUserUseCase
from byteblog.application.use_cases.users.logout_user import LogoutUserUseCase
from byteblog.application.use_cases.users.register_user import RegisterUserUseCase
from byteblog.domain.users.repositories import SessionStore
from byteblog.infrastructure.repositories.sqlalchemy import SqlAlchemyPostRepository
from byteblog.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from byteblog.infrastructure.sessions.memory_store import InMemorySessionStore
from byteblog.infrastructure.sessions.sqlalchemy_store import SqlAlchemySessionStore
from byteblog.interfaces.http.controllers.auth_controller import AuthController
from byteblog.interfaces.http.controllers.misc_controller import MiscController
from byteblog.interfaces.http.controllers.posts_controller import PostsController
from byteblog.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(cost=self._config.security.password_hash_cost)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository()

    @cached_property
    def session_store(self) -> SessionStore:
        if self._config.security.session_backend == "memory":
            return InMemorySessionStore()
        return SqlAlchemySessionStore()

    @cached_property
    def session_manager(self) -> SessionManager:
        seconds = self._config.security.session_lifetime
        return SessionManager(
            self.session_store,
            lifetime=timedelta(seconds=seconds) if seconds else None,
        )

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard(sessions=self.session_manager)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_manager,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_manager)

    @cached_property
    def posts_use_case(self) -> PostsUseCase:
        return PostsUseCase(posts=self.post_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            security=self._config.security,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            posts=self.posts_use_case,
            guard=self.access_guard,
            cookie_name=self._config.security.session_cookie_name,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
