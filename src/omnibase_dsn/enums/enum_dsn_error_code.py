# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""DSN Parse Error Code Enumeration.

Defines the canonical error codes raised while parsing a MySQL-style DSN.
Used for error classification and for machine-readable CLI output.
"""

from enum import Enum


class EnumDsnErrorCode(str, Enum):
    """Error codes for DSN parse failures.

    All codes describe structural, non-retryable failures of the input
    string. None of them are produced by formatting.

    Attributes:
        NO_SLASH: Non-empty input without the slash separating the database name
        UNTERMINATED_ADDRESS: Network address opened with "(" but not closed
            right before the database separator
        UNESCAPED_VALUE: Same as UNTERMINATED_ADDRESS, but a stray ")" was
            found inside the address span (likely a missing escape)
        QUERY_DECODE: Malformed percent-encoding in a parameter value
    """

    NO_SLASH = "no_slash"
    UNTERMINATED_ADDRESS = "unterminated_address"
    UNESCAPED_VALUE = "unescaped_value"
    QUERY_DECODE = "query_decode"


__all__ = ["EnumDsnErrorCode"]
