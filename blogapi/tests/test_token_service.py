from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from blogapi.application.services.token_service import JwtTokenService
from blogapi.shared.errors import AuthError

SECRET = "token-service-secret-with-enough-bytes-for-hs256"


def test_issue_then_verify_returns_subject() -> None:
    service = JwtTokenService(secret=SECRET)

    payload = service.verify(service.issue("5ede594c72055e463944e832aaaaaaaa"))

    assert payload.id == "5ede594c72055e463944e832aaaaaaaa"
    assert payload.expires_at - payload.issued_at == timedelta(hours=1)


def test_token_claims_are_id_iat_exp() -> None:
    token = JwtTokenService(secret=SECRET).issue("abc")

    claims = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert set(claims) == {"id", "iat", "exp"}
    assert claims["exp"] - claims["iat"] == 3600


def test_expired_token_is_forbidden() -> None:
    two_hours_ago = datetime.now(UTC) - timedelta(hours=2)
    issuer = JwtTokenService(secret=SECRET, clock=lambda: two_hours_ago)
    token = issuer.issue("abc")

    with pytest.raises(AuthError) as info:
        JwtTokenService(secret=SECRET).verify(token)

    assert info.value.status == 403
    assert info.value.message == "Forbidden"


def test_token_signed_with_other_secret_is_forbidden() -> None:
    token = JwtTokenService(secret="another-secret-with-enough-bytes-for-hs256").issue("abc")

    with pytest.raises(AuthError):
        JwtTokenService(secret=SECRET).verify(token)


def test_tampered_token_is_forbidden() -> None:
    service = JwtTokenService(secret=SECRET)
    header, payload, signature = service.issue("abc").split(".")
    forged = jwt.encode({"id": "someone-else", "iat": 0, "exp": 9999999999}, "x" * 32)

    with pytest.raises(AuthError):
        service.verify(f"{header}.{forged.split('.')[1]}.{signature}")


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_forbidden(token: str) -> None:
    with pytest.raises(AuthError):
        JwtTokenService(secret=SECRET).verify(token)


def test_empty_secret_rejected() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="")
