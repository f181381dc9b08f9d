# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from byteblog.shared.errors.base import DomainError


class DuplicateUsernameError(DomainError):
    code = "username_taken"
    status = HTTPStatus.CONFLICT
    message = "Username is already taken"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid username or password"


class AuthServiceError(DomainError):
    code = "internal_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Something went wrong, please try again"
