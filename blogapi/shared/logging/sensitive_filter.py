# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

SENSITIVE_PATTERNS = [
    # Signing secrets
    (r"(jwt[_-]?secret\s*[:=]\s*['\"]?)([^'\"\s]{4,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Bearer tokens and JWTs
    (r"(bearer\s+)([a-zA-Z0-9_\-\.]{20,})", r"\1***REDACTED***", re.IGNORECASE),
    (r"(token\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),
    (r"\beyJ[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+", r"***JWT***"),

    # Passwords and their hashes
    (r"(password(?:_hash)?\s*[:=]\s*['\"]?)([^'\"\s,}]{6,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"\b(scrypt|pbkdf2):[^\s'\"$]+\$[^\s'\"$]+\$[0-9a-f]+", r"\1:***HASH***"),

    # Database URLs with credentials
    (r"(postgresql|postgres|mysql|mongodb(?:\+srv)?)://([^:/]+):([^@]+)@", r"\1://\2:***REDACTED***@"),

    # Email addresses (partial masking)
    (r"([a-zA-Z0-9._%+-]+)@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})", r"***@\2"),

    # Authorization headers
    (r"(authorization\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
]


def sanitize_message(message: str) -> str:
    sanitized = message

    for pattern_tuple in SENSITIVE_PATTERNS:
        if len(pattern_tuple) == 2:
            pattern, replacement = pattern_tuple
            flags = 0
        else:
            pattern, replacement, flags = pattern_tuple

        sanitized = re.sub(pattern, replacement, sanitized, flags=flags)

    return sanitized


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
