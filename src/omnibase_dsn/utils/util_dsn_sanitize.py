# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""DSN sanitization for safe logging.

SECURITY: Production code should prefer not logging DSNs at all. When a DSN
has to appear in diagnostics, pass it through ``sanitize_dsn`` first.
"""

from __future__ import annotations

from omnibase_dsn.errors import DsnParseError
from omnibase_dsn.utils.util_dsn_parser import parse_dsn

INVALID_DSN_PLACEHOLDER = "[INVALID_DSN]"


def sanitize_dsn(dsn: str, *, mask: str = "***") -> str:
    """Sanitize a DSN by masking its password.

    The DSN is parsed and re-formatted, so the result is also canonical
    (sorted parameters, re-encoded values).

    Args:
        dsn: Raw DSN string, possibly containing credentials.
        mask: Replacement for a non-empty password.

    Returns:
        The canonical DSN with the password masked, or ``[INVALID_DSN]`` if
        ``dsn`` does not parse. The raw input is never echoed back.

    Example:
        >>> sanitize_dsn("root:secret@tcp(db:3306)/app")
        'root:***@tcp(db:3306)/app'
        >>> sanitize_dsn("root:secret@tcp(db:3306)")
        '[INVALID_DSN]'
    """
    try:
        parsed = parse_dsn(dsn)
    except DsnParseError:
        return INVALID_DSN_PLACEHOLDER
    return parsed.redacted(mask).format_dsn()


__all__: list[str] = [
    "INVALID_DSN_PLACEHOLDER",
    "sanitize_dsn",
]
