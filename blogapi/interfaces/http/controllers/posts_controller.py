# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from blogapi.application.services.schema_validator import SchemaValidator
from blogapi.application.use_cases.posts.create_post import CreatePostUseCase
from blogapi.application.use_cases.posts.delete_post import DeletePostUseCase
from blogapi.application.use_cases.posts.get_post import GetPostUseCase
from blogapi.application.use_cases.posts.list_posts import ListPostsUseCase
from blogapi.application.use_cases.posts.update_post import UpdatePostUseCase
from blogapi.domain.users.repositories import TokenService
from blogapi.interfaces.http.dto import CREATE_UPDATE_POST
from blogapi.interfaces.http.interceptors import (
    Authenticate,
    RequestContext,
    ValidateBody,
    pipeline,
    require_identity,
)
from blogapi.interfaces.http.presenters import present_post, present_posts_with_owner
from blogapi.shared.logging import logger


class PostsController:
    def __init__(
        self,
        *,
        create_use_case: CreatePostUseCase,
        list_use_case: ListPostsUseCase,
        get_use_case: GetPostUseCase,
        update_use_case: UpdatePostUseCase,
        delete_use_case: DeletePostUseCase,
        tokens: TokenService,
        schema_validator: SchemaValidator,
    ) -> None:
        self._create_use_case = create_use_case
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case
        self._authenticate = Authenticate(tokens)
        self._validate_post = ValidateBody(schema_validator, CREATE_UPDATE_POST)

    def create(self, ctx: RequestContext) -> tuple[Response, int]:
        owner_id = require_identity(ctx)
        post = self._create_use_case.execute(
            ctx.body["title"], ctx.body["description"], owner_id
        )

        logger.info(f"posts.create: ok post_id={post.id} owner={owner_id}")
        return jsonify({"message": "success", "post": present_post(post)}), 201

    def list_posts(self, ctx: RequestContext) -> tuple[Response, int]:
        rows = self._list_use_case.execute(require_identity(ctx))
        return jsonify({"posts": present_posts_with_owner(rows)}), 200

    def get_post(self, ctx: RequestContext) -> tuple[Response, int]:
        post = self._get_use_case.execute(ctx.params["post_id"])
        return jsonify(present_post(post)), 200

    def update(self, ctx: RequestContext) -> tuple[Response, int]:
        caller_id = require_identity(ctx)
        post_id = ctx.params["post_id"]
        self._update_use_case.execute(caller_id, post_id, ctx.body)

        logger.info(f"posts.update: ok post_id={post_id} owner={caller_id}")
        return jsonify({"message": "success"}), 200

    def delete(self, ctx: RequestContext) -> tuple[Response, int]:
        caller_id = require_identity(ctx)
        post_id = ctx.params["post_id"]
        self._delete_use_case.execute(caller_id, post_id)

        logger.info(f"posts.delete: ok post_id={post_id} owner={caller_id}")
        return jsonify({"message": "success"}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__)
        auth = self._authenticate
        bp.add_url_rule(
            "/posts",
            endpoint="create",
            view_func=pipeline(self._validate_post, auth)(self.create),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/posts",
            endpoint="list",
            view_func=pipeline(auth)(self.list_posts),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/posts/<post_id>",
            endpoint="get",
            view_func=pipeline(auth)(self.get_post),
            methods=["GET"],
        )
        # body is validated by the use case once ownership is settled
        bp.add_url_rule(
            "/posts/<post_id>",
            endpoint="update",
            view_func=pipeline(auth)(self.update),
            methods=["PATCH"],
        )
        bp.add_url_rule(
            "/posts/<post_id>",
            endpoint="delete",
            view_func=pipeline(auth)(self.delete),
            methods=["DELETE"],
        )
        return bp
