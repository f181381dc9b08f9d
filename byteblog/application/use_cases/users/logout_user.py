"""Use-case for ending a browser session."""

from __future__ import annotations

from byteblog.application.services.sessions import SessionManager
from byteblog.shared.errors import StoreUnavailableError
from byteblog.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> None:
        if not token:
            return
        try:
            self._sessions.destroy(token)
        except StoreUnavailableError:
            # the cookie is cleared regardless; an orphaned row expires on its own
            logger.exception("auth.logout: session store unavailable, clearing cookie anyway")
