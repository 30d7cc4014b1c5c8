# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import (
    Base,
    SessionFactory,
    create_engine_from_config,
    create_session_factory,
    init_db,
    unit_of_work_scope,
)

__all__ = [
    "Base",
    "SessionFactory",
    "create_engine_from_config",
    "create_session_factory",
    "init_db",
    "unit_of_work_scope",
]
