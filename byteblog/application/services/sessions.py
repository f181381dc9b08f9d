# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Server-side sessions keyed by an opaque cookie token."""

from __future__ import annotations

import re
import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from threading import Lock

from byteblog.domain.users.entities import Session
from byteblog.domain.users.repositories import SessionStore
from byteblog.shared.logging import logger

MAX_TOKEN_LENGTH = 256
DEFAULT_PURGE_INTERVAL = timedelta(minutes=5)
_TOKEN_RE = re.compile(r"^[A-Za-z0-9_\-]+$")


def _utcnow() -> datetime:
    return datetime.now(UTC)


def is_well_formed_token(token: object) -> bool:
    return (
        isinstance(token, str)
        and 0 < len(token) <= MAX_TOKEN_LENGTH
        and _TOKEN_RE.match(token) is not None
    )


class SessionManager:
    """Creates, resolves and destroys sessions held in a pluggable store.

    A session is Created by :meth:`create`, Active while :meth:`resolve`
    returns its user id, and Destroyed (for good) after :meth:`destroy` or
    once it expires. Expired sessions nobody asks for again are swept from
    the store by :meth:`create`, at most once per ``purge_interval``.
    """

    def __init__(
        self,
        store: SessionStore,
        *,
        lifetime: timedelta | None = timedelta(days=7),
        clock: Callable[[], datetime] = _utcnow,
        purge_interval: timedelta = DEFAULT_PURGE_INTERVAL,
    ) -> None:
        self._store = store
        self._lifetime = lifetime
        self._clock = clock
        self._purge_interval = purge_interval
        self._last_purge: datetime | None = None
        self._purge_lock = Lock()

    @property
    def lifetime(self) -> timedelta | None:
        return self._lifetime

    def create(self, user_id: int) -> str:
        now = self._clock()
        self._purge_if_due(now)
        expires_at = now + self._lifetime if self._lifetime else None
        token = secrets.token_urlsafe(48)
        self._store.save(
            Session(token=token, user_id=user_id, created_at=now, expires_at=expires_at)
        )
        logger.info(f"sessions.create: user={user_id} tok={token[:8]}…")
        return token

    def resolve(self, token: str | None) -> int | None:
        if not is_well_formed_token(token):
            return None
        session = self._store.get(token)
        if session is None:
            return None
        if session.is_expired(self._clock()):
            logger.info(f"sessions.resolve: expired user={session.user_id} tok={token[:8]}…")
            self._store.delete(token)
            return None
        return session.user_id

    def destroy(self, token: str | None) -> None:
        if not is_well_formed_token(token):
            return
        self._store.delete(token)
        logger.info(f"sessions.destroy: tok={token[:8]}…")

    def purge_expired(self) -> int:
        now = self._clock()
        with self._purge_lock:
            self._last_purge = now
        return self._purge(now)

    def _purge_if_due(self, now: datetime) -> None:
        with self._purge_lock:
            if self._last_purge is not None and now - self._last_purge < self._purge_interval:
                return
            self._last_purge = now
        self._purge(now)

    def _purge(self, now: datetime) -> int:
        removed = self._store.purge_expired(now)
        if removed:
            logger.info(f"sessions.purge: removed={removed}")
        return removed


__all__ = ["DEFAULT_PURGE_INTERVAL", "MAX_TOKEN_LENGTH", "SessionManager", "is_well_formed_token"]
