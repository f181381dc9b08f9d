# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts.entities import Comment, Post
from .users.entities import Session, User

__all__ = ["Comment", "Post", "Session", "User"]
