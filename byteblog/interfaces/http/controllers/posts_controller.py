# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, redirect
from pydantic import ValidationError

from byteblog.application.services.access_guard import AccessGuard
from byteblog.application.use_cases.posts import PostsUseCase
from byteblog.interfaces.http.dto.posts import CommentRequestDTO, PostRequestDTO
from byteblog.interfaces.http.guards import login_required
from byteblog.interfaces.http.request_data import request_payload
from byteblog.shared.errors.validation import raise_validation_error


class PostsController:
    def __init__(self, *, posts: PostsUseCase, guard: AccessGuard, cookie_name: str) -> None:
        self._posts = posts
        self._guard = guard
        self._cookie_name = cookie_name

    def index(self) -> Response:
        return jsonify({"posts": [post.to_dict() for post in self._posts.list_posts()]})

    def show(self, post_id: int) -> Response:
        post, comments = self._posts.get_post(post_id)
        return jsonify(
            {"post": post.to_dict(), "comments": [comment.to_dict() for comment in comments]}
        )

    def create(self) -> Response:
        dto = self._parse_post()
        self._posts.create_post(dto.title, dto.content)
        return redirect("/")

    def edit(self, post_id: int) -> Response:
        dto = self._parse_post()
        self._posts.update_post(post_id, dto.title, dto.content)
        return redirect(f"/post/{post_id}")

    def delete(self, post_id: int) -> Response:
        self._posts.delete_post(post_id)
        return redirect("/")

    def comment(self, post_id: int) -> Response:
        try:
            dto = CommentRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc, message="Author, content and a rating from 1 to 5 are required")
        self._posts.add_comment(post_id, dto.author, dto.content, dto.rating)
        return redirect(f"/post/{post_id}")

    def _parse_post(self) -> PostRequestDTO:
        try:
            return PostRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc, message="Title and content are required")

    def as_blueprint(self) -> Blueprint:
        protected = login_required(self._guard, self._cookie_name)
        bp = Blueprint("posts", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/post/<int:post_id>", view_func=self.show, methods=["GET"])
        bp.add_url_rule("/new-post", view_func=protected(self.create), methods=["POST"])
        bp.add_url_rule(
            "/post/edit/<int:post_id>", view_func=protected(self.edit), methods=["POST"]
        )
        bp.add_url_rule(
            "/post/delete/<int:post_id>", view_func=protected(self.delete), methods=["POST"]
        )
        bp.add_url_rule(
            "/post/<int:post_id>/comment", view_func=self.comment, methods=["POST"]
        )
        return bp
