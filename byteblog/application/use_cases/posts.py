# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from byteblog.domain.posts.entities import Comment, Post
from byteblog.domain.posts.exceptions import PostNotFoundError
from byteblog.domain.posts.repositories import PostRepository
from byteblog.shared.errors import ValidationError
from byteblog.shared.logging import logger

MIN_RATING = 1
MAX_RATING = 5
# largest value an SQL INTEGER primary key can hold
MAX_POST_ID = 2**63 - 1


def _require_text(**fields: str) -> None:
    missing = sorted(name for name, value in fields.items() if not (value or "").strip())
    if missing:
        raise ValidationError(
            context={"fields": missing},
            message=f"Required: {', '.join(missing)}",
        )


def _require_known_id(post_id: int) -> None:
    if not 1 <= post_id <= MAX_POST_ID:
        raise PostNotFoundError(post_id)


class PostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def list_posts(self) -> Sequence[Post]:
        return self._posts.list_posts()

    def get_post(self, post_id: int) -> tuple[Post, Sequence[Comment]]:
        _require_known_id(post_id)
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post, self._posts.list_comments(post_id)

    def create_post(self, title: str, content: str) -> Post:
        _require_text(title=title, content=content)
        post = self._posts.add(title.strip(), content)
        logger.info(f"posts.create: ok post_id={post.id}")
        return post

    def update_post(self, post_id: int, title: str, content: str) -> Post:
        _require_known_id(post_id)
        _require_text(title=title, content=content)
        post = self._posts.update(post_id, title.strip(), content)
        if post is None:
            raise PostNotFoundError(post_id)
        logger.info(f"posts.update: ok post_id={post_id}")
        return post

    def delete_post(self, post_id: int) -> None:
        _require_known_id(post_id)
        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
        logger.info(f"posts.delete: ok post_id={post_id}")

    def add_comment(self, post_id: int, author: str, content: str, rating: int) -> Comment:
        _require_known_id(post_id)
        _require_text(author=author, content=content)
        if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                context={"fields": ["rating"]},
                message=f"Rating must be between {MIN_RATING} and {MAX_RATING}",
            )
        comment = self._posts.add_comment(post_id, author.strip(), content, rating)
        if comment is None:
            raise PostNotFoundError(post_id)
        logger.info(f"posts.comment: ok post_id={post_id} comment_id={comment.id}")
        return comment
