from .entities import TokenPayload, User
from .exceptions import (
    InvalidPasswordError,
    MissingIdentityError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "InvalidPasswordError",
    "MissingIdentityError",
    "PasswordHasher",
    "TokenPayload",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
