# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from blogapi.application.services.password_hashing import WerkzeugPasswordHasher
from blogapi.application.services.schema_validator import SchemaValidator
from blogapi.application.services.token_service import JwtTokenService
from blogapi.application.use_cases.posts.create_post import CreatePostUseCase
from blogapi.application.use_cases.posts.delete_post import DeletePostUseCase
from blogapi.application.use_cases.posts.get_post import GetPostUseCase
from blogapi.application.use_cases.posts.list_posts import ListPostsUseCase
from blogapi.application.use_cases.posts.update_post import UpdatePostUseCase
from blogapi.application.use_cases.users.login_user import LoginUserUseCase
from blogapi.application.use_cases.users.register_user import RegisterUserUseCase
from blogapi.infrastructure.db import create_engine_from_config, create_session_factory
from blogapi.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from blogapi.interfaces.http.controllers.auth_controller import AuthController
from blogapi.interfaces.http.controllers.posts_controller import PostsController
from blogapi.interfaces.http.dto import CREATE_UPDATE_POST, request_schemas
from blogapi.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Infrastructure

    @cached_property
    def engine(self) -> Engine:
        return create_engine_from_config(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.session_factory)

    # Services

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
            expires_in=self.config.jwt_expires_in,
        )

    @cached_property
    def schema_validator(self) -> SchemaValidator:
        return SchemaValidator(request_schemas())

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository)

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    @cached_property
    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(posts=self.post_repository)

    @cached_property
    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(
            posts=self.post_repository,
            schema_validator=self.schema_validator,
            schema_name=CREATE_UPDATE_POST,
        )

    @cached_property
    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(posts=self.post_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            schema_validator=self.schema_validator,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            create_use_case=self.create_post_use_case,
            list_use_case=self.list_posts_use_case,
            get_use_case=self.get_post_use_case,
            update_use_case=self.update_post_use_case,
            delete_use_case=self.delete_post_use_case,
            tokens=self.token_service,
            schema_validator=self.schema_validator,
        )
