# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from blogapi.shared.errors import ValidationError

PASSWORD_SYMBOLS = "!@#$%^&*"

EMAIL_RE = re.compile(r"\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+", re.ASCII)
PASSWORD_RE = re.compile(
    r"(?=.*\d)(?=.*[A-Z])(?=.*[a-z])(?=.*[!@#$%^&*])[\w!@#$%^&*]{8,}",
    re.ASCII,
)


def validate_email(value: str | None) -> bool:
    if not value:
        raise ValidationError("Email not specified.")
    if not EMAIL_RE.fullmatch(value):
        raise ValidationError("Email is incorrect.")
    return True


def validate_password(value: str | None) -> bool:
    """Require 8+ chars with a digit, both cases and one of ``PASSWORD_SYMBOLS``."""
    if not value:
        raise ValidationError("Password not specified.")
    if not PASSWORD_RE.fullmatch(value):
        raise ValidationError("Password too weak.")
    return True


__all__ = ["PASSWORD_SYMBOLS", "validate_email", "validate_password"]
