# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from byteblog.domain.users.entities import User
from byteblog.domain.users.exceptions import AuthServiceError, DuplicateUsernameError
from byteblog.domain.users.repositories import PasswordHasher, UserRepository
from byteblog.shared.errors import InfrastructureError, ValidationError
from byteblog.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        if not username or not password:
            raise ValidationError(
                "username_and_password_required",
                message="Username and password are required",
            )
        try:
            hashed = self._password_hasher.hash(password)
            user = self._users.create_user(username, hashed)
        except DuplicateUsernameError:
            logger.info(f"auth.register: username taken username='{username}'")
            raise
        except InfrastructureError as exc:
            logger.error(f"auth.register: {exc.code} username='{username}' context={dict(exc.context or {})}")
            raise AuthServiceError() from exc

        logger.info(f"auth.register: ok user_id={user.id}")
        return user
