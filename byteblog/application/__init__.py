# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from byteblog.domain.posts.repositories import PostRepository
from byteblog.domain.users.repositories import PasswordHasher, SessionStore, UserRepository

__all__ = ["PasswordHasher", "PostRepository", "SessionStore", "UserRepository"]
