# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Utility modules for omnibase_dsn.

This package provides the DSN codec:
    - util_dsn_parser: DSN string to ModelDSN
    - util_dsn_formatter: ModelDSN to canonical DSN string
    - util_query_escape: Strict query-value percent-encoding
    - util_dsn_sanitize: Password-masked DSN rendering for logs
"""

from omnibase_dsn.utils.util_dsn_formatter import format_dsn
from omnibase_dsn.utils.util_dsn_parser import parse_dsn, parse_dsn_params
from omnibase_dsn.utils.util_dsn_sanitize import INVALID_DSN_PLACEHOLDER, sanitize_dsn
from omnibase_dsn.utils.util_query_escape import query_escape, query_unescape

__all__: list[str] = [
    "INVALID_DSN_PLACEHOLDER",
    "format_dsn",
    "parse_dsn",
    "parse_dsn_params",
    "query_escape",
    "query_unescape",
    "sanitize_dsn",
]
