# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from blogapi.domain.users.entities import TokenPayload
from blogapi.domain.users.repositories import TokenService
from blogapi.shared.errors import AuthError
from blogapi.shared.logging import logger

TOKEN_LIFETIME_SECONDS = 3600


def _utc_now() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Issues and verifies HMAC-signed identity tokens.

    Every token carries ``{"id", "iat", "exp"}`` with ``exp`` one lifetime
    after ``iat``. Verification failures of any kind (bad signature, expiry,
    garbage input) surface as the same 403 ``AuthError``.
    """

    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        expires_in: int = TOKEN_LIFETIME_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(seconds=expires_in)
        self._clock = clock

    def issue(self, subject_id: str) -> str:
        issued_at = self._clock()
        payload = {
            "id": subject_id,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenPayload:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"auth.token: rejected reason={type(exc).__name__}")
            raise AuthError() from exc

        return TokenPayload(
            id=claims.get("id"),
            issued_at=datetime.fromtimestamp(claims["iat"], UTC),
            expires_at=datetime.fromtimestamp(claims["exp"], UTC),
        )


__all__ = ["JwtTokenService", "TOKEN_LIFETIME_SECONDS"]
