# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from byteblog.application import PostRepository
from byteblog.domain import Comment as DomainComment
from byteblog.domain import Post as DomainPost
from byteblog.infrastructure.db.models import Comment, Post
from byteblog.infrastructure.db.session import session_scope
from byteblog.infrastructure.db.timestamps import as_utc
from byteblog.shared.errors import StoreUnavailableError
from byteblog.shared.logging import logger


def _post(row: Post) -> DomainPost:
    return DomainPost(
        id=row.id,
        title=row.title,
        content=row.content,
        created_at=as_utc(row.created_at),
    )


def _comment(row: Comment) -> DomainComment:
    return DomainComment(
        id=row.id,
        post_id=row.post_id,
        author=row.author,
        content=row.content,
        rating=row.rating,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyPostRepository(PostRepository):
    def list_posts(self) -> Sequence[DomainPost]:
        try:
            with session_scope() as session:
                rows = session.query(Post).order_by(Post.id.desc()).all()
                return [_post(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.exception("posts.list: database error")
            raise StoreUnavailableError("list_posts") from exc

    def get(self, post_id: int) -> DomainPost | None:
        try:
            with session_scope() as session:
                row = session.get(Post, post_id)
                return _post(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception(f"posts.get: database error post_id={post_id}")
            raise StoreUnavailableError("get_post") from exc

    def add(self, title: str, content: str) -> DomainPost:
        try:
            with session_scope() as session:
                row = Post(title=title, content=content)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _post(row)
        except SQLAlchemyError as exc:
            logger.exception("posts.add: database error")
            raise StoreUnavailableError("add_post") from exc

    def update(self, post_id: int, title: str, content: str) -> DomainPost | None:
        try:
            with session_scope() as session:
                row = session.get(Post, post_id)
                if row is None:
                    return None
                row.title = title
                row.content = content
                session.flush()
                return _post(row)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.update: database error post_id={post_id}")
            raise StoreUnavailableError("update_post") from exc

    def delete(self, post_id: int) -> bool:
        try:
            with session_scope() as session:
                row = session.get(Post, post_id)
                if row is None:
                    return False
                session.delete(row)
                return True
        except SQLAlchemyError as exc:
            logger.exception(f"posts.delete: database error post_id={post_id}")
            raise StoreUnavailableError("delete_post") from exc

    def list_comments(self, post_id: int) -> Sequence[DomainComment]:
        try:
            with session_scope() as session:
                rows = (
                    session.query(Comment)
                    .filter(Comment.post_id == post_id)
                    .order_by(Comment.id.desc())
                    .all()
                )
                return [_comment(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.exception(f"posts.comments: database error post_id={post_id}")
            raise StoreUnavailableError("list_comments") from exc

    def add_comment(
        self, post_id: int, author: str, content: str, rating: int
    ) -> DomainComment | None:
        try:
            with session_scope() as session:
                if session.get(Post, post_id) is None:
                    return None
                row = Comment(post_id=post_id, author=author, content=content, rating=rating)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _comment(row)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.add_comment: database error post_id={post_id}")
            raise StoreUnavailableError("add_comment") from exc
