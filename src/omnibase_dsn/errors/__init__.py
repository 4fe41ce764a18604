# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""DSN Errors Module.

This module provides the error classes raised while parsing a DSN and the
context model they carry.

Exports:
    ModelDsnErrorContext: Configuration model for bundled error context
    DsnParseError: Base parse error class
    NoSlashError: Missing database separator
    UnterminatedAddressError: Network address not closed before the separator
    UnescapedValueError: Stray ")" inside the address span
    QueryDecodeError: Malformed percent-encoding in a parameter value

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Passwords or parameter values
        - The raw DSN string

    SAFE to include:
        - Error codes
        - Character positions
        - Parameter names
        - Correlation IDs
"""

from omnibase_dsn.errors.dsn_errors import (
    DsnParseError,
    NoSlashError,
    QueryDecodeError,
    UnescapedValueError,
    UnterminatedAddressError,
)
from omnibase_dsn.errors.model_dsn_error_context import ModelDsnErrorContext

__all__: list[str] = [
    "DsnParseError",
    "ModelDsnErrorContext",
    "NoSlashError",
    "QueryDecodeError",
    "UnescapedValueError",
    "UnterminatedAddressError",
]
