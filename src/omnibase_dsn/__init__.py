# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""ONEX DSN Codec - MySQL-style Data Source Name parsing and formatting.

This package converts between the single human-writable connection string

    [user[:password]@][net[(addr)]]/dbname[?param1=value1&paramN=valueN]

and a structured, immutable record:

- parse_dsn: DSN string to ModelDSN, raising DsnParseError subclasses
- ModelDSN.format_dsn / format_dsn: canonical string with sorted, encoded
  parameters
- sanitize_dsn: password-masked form for logs
- omnibase-dsn: click CLI over the above

Nothing in this package opens connections or performs I/O.
"""

from omnibase_dsn.enums import EnumDsnErrorCode
from omnibase_dsn.errors import (
    DsnParseError,
    ModelDsnErrorContext,
    NoSlashError,
    QueryDecodeError,
    UnescapedValueError,
    UnterminatedAddressError,
)
from omnibase_dsn.types import ModelDSN
from omnibase_dsn.utils import (
    format_dsn,
    parse_dsn,
    query_escape,
    query_unescape,
    sanitize_dsn,
)

__all__: list[str] = [
    "DsnParseError",
    "EnumDsnErrorCode",
    "ModelDSN",
    "ModelDsnErrorContext",
    "NoSlashError",
    "QueryDecodeError",
    "UnescapedValueError",
    "UnterminatedAddressError",
    "format_dsn",
    "parse_dsn",
    "query_escape",
    "query_unescape",
    "sanitize_dsn",
]
