"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from blogapi.domain.users.repositories import PasswordHasher
from blogapi.shared.errors import HashingError


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted scrypt hashes; the salt is random per call."""

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (OSError, ValueError, TypeError) as exc:
            raise HashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            return False
