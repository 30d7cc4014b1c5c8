# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from datetime import UTC, datetime

from blogapi.shared.errors import InvalidIdentifierError

_IDENTIFIER_RE = re.compile(r"^[0-9a-f]{32}$")


def ensure_identifier(value: str) -> str:
    """Reject ids that could never match a stored row, like a failed cast."""
    if not isinstance(value, str) or not _IDENTIFIER_RE.match(value):
        raise InvalidIdentifierError(str(value))
    return value


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
