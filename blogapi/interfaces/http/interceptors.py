# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ordered request interceptors run in front of controller methods.

An interceptor receives the ``RequestContext`` and either returns it
(possibly with ``identity`` or ``body`` filled in) or raises an ``AppError``,
which stops the chain before the handler runs.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import wraps
from typing import Any

from flask import g, request

from blogapi.application.services.schema_validator import SchemaValidator
from blogapi.domain.users.entities import TokenPayload
from blogapi.domain.users.exceptions import MissingIdentityError
from blogapi.domain.users.repositories import TokenService
from blogapi.shared.errors import AuthError
from blogapi.shared.logging import logger


@dataclass(slots=True)
class RequestContext:
    headers: Mapping[str, str]
    body: Any = None
    params: dict[str, Any] = field(default_factory=dict)
    identity: TokenPayload | None = None


Interceptor = Callable[[RequestContext], RequestContext]


class Authenticate:
    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def __call__(self, ctx: RequestContext) -> RequestContext:
        header = ctx.headers.get("Authorization")
        if not header:
            raise AuthError("No token provided.")

        # "Bearer <token>"; anything without a second part fails verification
        parts = header.split()
        token = parts[1] if len(parts) > 1 else ""

        ctx.identity = self._tokens.verify(token)
        return ctx


class ValidateBody:
    def __init__(self, validator: SchemaValidator, schema_name: str) -> None:
        self._validator = validator
        self._schema_name = schema_name

    def __call__(self, ctx: RequestContext) -> RequestContext:
        ctx.body = self._validator.validate(self._schema_name, ctx.body)
        return ctx


def require_identity(ctx: RequestContext) -> str:
    if ctx.identity is None or not ctx.identity.id:
        raise MissingIdentityError()
    return ctx.identity.id


def run_interceptors(ctx: RequestContext, interceptors: tuple[Interceptor, ...]) -> RequestContext:
    for interceptor in interceptors:
        ctx = interceptor(ctx)
    return ctx


def pipeline(*interceptors: Interceptor):
    """Wrap a ``handler(ctx)`` into a Flask view running ``interceptors`` first."""

    def decorator(handler: Callable[[RequestContext], Any]):
        @wraps(handler)
        def view(**route_params: Any):
            body = request.get_json(silent=True)
            ctx = RequestContext(
                headers=request.headers,
                body={} if body is None else body,
                params=dict(route_params),
            )
            ctx = run_interceptors(ctx, interceptors)
            if ctx.identity is not None:
                g.user_id = ctx.identity.id
                logger.debug(f"Auth OK: user={ctx.identity.id} {request.method} {request.path}")
            return handler(ctx)

        return view

    return decorator


__all__ = [
    "Authenticate",
    "Interceptor",
    "RequestContext",
    "ValidateBody",
    "pipeline",
    "require_identity",
    "run_interceptors",
]
