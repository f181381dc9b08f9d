# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, redirect, request
from pydantic import ValidationError

from byteblog.application.use_cases.users.login_user import LoginUserUseCase
from byteblog.application.use_cases.users.logout_user import LogoutUserUseCase
from byteblog.application.use_cases.users.register_user import RegisterUserUseCase
from byteblog.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO
from byteblog.interfaces.http.guards import LOGIN_PATH
from byteblog.interfaces.http.request_data import request_payload
from byteblog.shared.config.settings import SecurityConfig
from byteblog.shared.errors.validation import raise_validation_error
from byteblog.shared.logging import logger

HOME_PATH = "/"


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._security = security

    def register(self) -> Response:
        try:
            dto = RegisterRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc, message="Invalid username or password format")

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: redirecting user_id={user.id} to login")
        return redirect(LOGIN_PATH)

    def login(self) -> Response:
        try:
            dto = LoginRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc, message="Invalid username or password format")

        token = self._login_use_case.execute(dto.username, dto.password)

        response = redirect(HOME_PATH)
        lifetime = self._security.session_lifetime
        response.set_cookie(
            self._security.session_cookie_name,
            token,
            max_age=lifetime or None,
            path="/",
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        return response

    def logout(self) -> Response:
        token = request.cookies.get(self._security.session_cookie_name, "")

        self._logout_use_case.execute(token)

        response = redirect(LOGIN_PATH)
        response.delete_cookie(
            self._security.session_cookie_name,
            path="/",
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        logger.info("auth.logout: ok")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        return bp
