# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from byteblog.domain.users.entities import User as DomainUser
from byteblog.domain.users.exceptions import DuplicateUsernameError
from byteblog.domain.users.repositories import UserRepository
from byteblog.infrastructure.db.models import User
from byteblog.infrastructure.db.session import session_scope
from byteblog.infrastructure.db.timestamps import as_utc
from byteblog.shared.errors import StoreUnavailableError
from byteblog.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.query(User).filter(User.username == username).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception("users.find_by_username: database error")
            raise StoreUnavailableError("find_by_username") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.get(User, user_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception("users.find_by_id: database error")
            raise StoreUnavailableError("find_by_id") from exc

    def create_user(self, username: str, password_hash: str) -> DomainUser:
        # the UNIQUE constraint on users.username decides concurrent races
        try:
            with session_scope() as session:
                row = User(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateUsernameError(context={"username": username}) from exc
        except SQLAlchemyError as exc:
            logger.exception("users.create_user: database error")
            raise StoreUnavailableError("create_user") from exc
