# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Comment, Post


class PostRepository(Protocol):
    def list_posts(self) -> Sequence[Post]: ...
    def get(self, post_id: int) -> Post | None: ...
    def add(self, title: str, content: str) -> Post: ...
    def update(self, post_id: int, title: str, content: str) -> Post | None: ...
    def delete(self, post_id: int) -> bool: ...
    def list_comments(self, post_id: int) -> Sequence[Comment]: ...
    def add_comment(self, post_id: int, author: str, content: str, rating: int) -> Comment | None: ...
