from .base import (
    AppError,
    AuthError,
    ConflictError,
    HashingError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthError",
    "ConflictError",
    "HashingError",
    "InvalidIdentifierError",
    "NotFoundError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
