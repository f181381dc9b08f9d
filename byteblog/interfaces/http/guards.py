# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import g, redirect, request

from byteblog.application.services.access_guard import AccessGuard, Deny
from byteblog.shared.logging import logger

LOGIN_PATH = "/login"


def login_required(guard: AccessGuard, cookie_name: str) -> Callable:
    def decorator(view: Callable) -> Callable:
        @wraps(view)
        def wrapped(*args, **kwargs):
            decision = guard.require_authenticated(request.cookies.get(cookie_name))
            if isinstance(decision, Deny):
                logger.info(f"guard: denied {request.method} {request.path}")
                return redirect(LOGIN_PATH)
            g.user_id = decision.user_id
            return view(*args, **kwargs)

        return wrapped

    return decorator


__all__ = ["LOGIN_PATH", "login_required"]
