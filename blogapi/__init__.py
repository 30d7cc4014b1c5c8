# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Authenticated blogging API: users, bearer tokens and owner-scoped posts."""

__version__ = "1.0.0"
