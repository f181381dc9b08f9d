# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from byteblog.domain.users.entities import Session
from byteblog.domain.users.repositories import SessionStore
from byteblog.infrastructure.db.models import SessionRecord
from byteblog.infrastructure.db.session import session_scope
from byteblog.infrastructure.db.timestamps import as_utc
from byteblog.shared.errors import StoreUnavailableError
from byteblog.shared.logging import logger


class SqlAlchemySessionStore(SessionStore):
    def save(self, session: Session) -> None:
        try:
            with session_scope() as db:
                db.add(
                    SessionRecord(
                        token=session.token,
                        user_id=session.user_id,
                        created_at=as_utc(session.created_at),
                        expires_at=as_utc(session.expires_at) if session.expires_at else None,
                    )
                )
        except SQLAlchemyError as exc:
            logger.exception(f"sessions.save: database error user={session.user_id}")
            raise StoreUnavailableError("session_save") from exc

    def get(self, token: str) -> Session | None:
        try:
            with session_scope() as db:
                row = db.query(SessionRecord).filter(SessionRecord.token == token).first()
                if not row:
                    return None
                return Session(
                    token=row.token,
                    user_id=row.user_id,
                    created_at=as_utc(row.created_at),
                    expires_at=as_utc(row.expires_at) if row.expires_at else None,
                )
        except SQLAlchemyError as exc:
            logger.exception("sessions.get: database error")
            raise StoreUnavailableError("session_get") from exc

    def delete(self, token: str) -> None:
        try:
            with session_scope() as db:
                db.query(SessionRecord).filter(SessionRecord.token == token).delete()
        except SQLAlchemyError as exc:
            logger.exception("sessions.delete: database error")
            raise StoreUnavailableError("session_delete") from exc

    def purge_expired(self, now: datetime) -> int:
        try:
            with session_scope() as db:
                return (
                    db.query(SessionRecord)
                    .filter(SessionRecord.expires_at.is_not(None))
                    .filter(SessionRecord.expires_at <= as_utc(now))
                    .delete(synchronize_session=False)
                )
        except SQLAlchemyError as exc:
            logger.exception("sessions.purge: database error")
            raise StoreUnavailableError("session_purge") from exc
