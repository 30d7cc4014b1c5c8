# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .input_validators import validate_email, validate_password
from .password_hashing import WerkzeugPasswordHasher
from .schema_validator import SchemaValidationError, SchemaValidator, UnknownSchemaError
from .token_service import JwtTokenService

__all__ = [
    "JwtTokenService",
    "SchemaValidationError",
    "SchemaValidator",
    "UnknownSchemaError",
    "WerkzeugPasswordHasher",
    "validate_email",
    "validate_password",
]
