# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from blogapi.application.services.schema_validator import SchemaValidator
from blogapi.application.use_cases.users.login_user import LoginUserUseCase
from blogapi.application.use_cases.users.register_user import RegisterUserUseCase
from blogapi.interfaces.http.dto import LOGIN_USER, REGISTER_USER
from blogapi.interfaces.http.interceptors import RequestContext, ValidateBody, pipeline
from blogapi.interfaces.http.presenters import present_user
from blogapi.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        schema_validator: SchemaValidator,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._schema_validator = schema_validator

    def register(self, ctx: RequestContext) -> tuple[Response, int]:
        user = self._register_use_case.execute(ctx.body["email"], ctx.body["password"])

        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify({"message": "success", "body": present_user(user)}), 201

    def login(self, ctx: RequestContext) -> tuple[Response, int]:
        token = self._login_use_case.execute(ctx.body["email"], ctx.body["password"])

        logger.info("auth.login: ok")
        return jsonify({"token": token}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule(
            "/register",
            endpoint="register",
            view_func=pipeline(ValidateBody(self._schema_validator, REGISTER_USER))(self.register),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/login",
            endpoint="login",
            view_func=pipeline(ValidateBody(self._schema_validator, LOGIN_USER))(self.login),
            methods=["POST"],
        )
        return bp
