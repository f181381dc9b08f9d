# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from byteblog.application.services.sessions import SessionManager
from byteblog.domain.users.exceptions import AuthServiceError, InvalidCredentialsError
from byteblog.domain.users.repositories import PasswordHasher, UserRepository
from byteblog.shared.errors import InfrastructureError, ValidationError
from byteblog.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionManager,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher

    @cached_property
    def _dummy_hash(self) -> str:
        # verified against when the user is unknown so both failure paths cost one hash
        return self._password_hasher.hash("byteblog-dummy-password")

    def execute(self, username: str, password: str) -> str:
        if not username or not password:
            raise ValidationError(
                "username_and_password_required",
                message="Username and password are required",
            )
        try:
            user = self._users.find_by_username(username)
            if user is None:
                self._password_hasher.verify(password, self._dummy_hash)
                password_valid = False
            else:
                password_valid = self._password_hasher.verify(password, user.password_hash)

            if not password_valid or user is None:
                logger.warning(f"auth.login: invalid credentials username='{username}'")
                raise InvalidCredentialsError()

            token = self._sessions.create(user.id)
        except InfrastructureError as exc:
            logger.error(f"auth.login: {exc.code} username='{username}' context={dict(exc.context or {})}")
            raise AuthServiceError() from exc

        logger.info(f"auth.login: ok user_id={user.id}")
        return token
