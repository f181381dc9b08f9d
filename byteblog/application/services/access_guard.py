# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from byteblog.application.services.sessions import SessionManager


@dataclass(slots=True, frozen=True)
class Allow:
    user_id: int


@dataclass(slots=True, frozen=True)
class Deny:
    pass


AccessDecision = Allow | Deny


class AccessGuard:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def require_authenticated(self, session_token: str | None) -> AccessDecision:
        user_id = self._sessions.resolve(session_token)
        if user_id is None:
            return Deny()
        return Allow(user_id=user_id)


__all__ = ["AccessDecision", "AccessGuard", "Allow", "Deny"]
