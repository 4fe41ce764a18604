# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Enumerations for omnibase_dsn."""

from omnibase_dsn.enums.enum_dsn_error_code import EnumDsnErrorCode

__all__: list[str] = [
    "EnumDsnErrorCode",
]
