from __future__ import annotations

from datetime import UTC, datetime

import pytest

from blogapi.application.services.token_service import JwtTokenService
from blogapi.domain.users.entities import TokenPayload
from blogapi.domain.users.exceptions import MissingIdentityError
from blogapi.interfaces.http.interceptors import (
    Authenticate,
    RequestContext,
    ValidateBody,
    require_identity,
    run_interceptors,
)
from blogapi.shared.errors import AuthError, ValidationError


def test_missing_header_short_circuits(token_service: JwtTokenService) -> None:
    with pytest.raises(AuthError) as info:
        Authenticate(token_service)(RequestContext(headers={}))

    assert info.value.status == 403
    assert info.value.message == "No token provided."


def test_bearer_token_sets_identity(token_service: JwtTokenService) -> None:
    token = token_service.issue("abc")
    ctx = RequestContext(headers={"Authorization": f"Bearer {token}"})

    ctx = Authenticate(token_service)(ctx)

    assert ctx.identity is not None
    assert require_identity(ctx) == "abc"


@pytest.mark.parametrize("header", ["Bearer", "Bearer not.a.jwt", "Token"])
def test_bad_authorization_header_is_forbidden(token_service: JwtTokenService, header: str) -> None:
    with pytest.raises(AuthError) as info:
        Authenticate(token_service)(RequestContext(headers={"Authorization": header}))

    assert info.value.message == "Forbidden"


def test_chain_stops_at_first_failure(token_service: JwtTokenService, schema_validator) -> None:
    calls: list[str] = []

    def spy(ctx: RequestContext) -> RequestContext:
        calls.append("spy")
        return ctx

    ctx = RequestContext(headers={}, body={"title": "t", "description": "d"})
    with pytest.raises(AuthError):
        run_interceptors(
            ctx,
            (ValidateBody(schema_validator, "create-update-post"), Authenticate(token_service), spy),
        )

    assert calls == []


def test_validate_body_replaces_body_with_cleaned_payload(schema_validator) -> None:
    ctx = RequestContext(headers={}, body={"title": "t", "description": "d", "ownerId": "x"})

    ctx = ValidateBody(schema_validator, "create-update-post")(ctx)

    assert ctx.body == {"title": "t", "description": "d"}


def test_validate_body_failure(schema_validator) -> None:
    with pytest.raises(ValidationError):
        ValidateBody(schema_validator, "create-update-post")(RequestContext(headers={}, body={}))


def test_require_identity_without_id() -> None:
    now = datetime.now(UTC)
    ctx = RequestContext(headers={}, identity=TokenPayload(id=None, issued_at=now, expires_at=now))

    with pytest.raises(MissingIdentityError) as info:
        require_identity(ctx)

    assert info.value.status == 422
