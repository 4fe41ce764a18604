# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""MySQL-style DSN formatter.

Renders a ``ModelDSN`` into canonical string form. Formatting is total: it
does not re-validate the grammar, so any record yields a string.

Canonicalization rules:
    - ``user[:password]@`` only when ``user`` is set; ``:password`` only
      when ``password`` is also set
    - ``net[(addr)]`` only when ``network`` is set; ``(addr)`` only when
      ``address`` is also set
    - ``/dbname`` always, even when ``database`` is empty
    - parameters sorted by key, values percent-encoded; an empty mapping
      adds nothing (no trailing ``?``)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from omnibase_dsn.utils.util_query_escape import query_escape

if TYPE_CHECKING:
    from omnibase_dsn.types import ModelDSN


def format_dsn(dsn: ModelDSN) -> str:
    """Format ``dsn`` as a canonical DSN string.

    Example:
        >>> format_dsn(ModelDSN(user="root", database="Test"))
        'root@/Test'
    """
    parts: list[str] = []

    # [username[:password]@]
    if dsn.user:
        parts.append(dsn.user)
        if dsn.password:
            parts.append(f":{dsn.password}")
        parts.append("@")

    # [protocol[(address)]]
    if dsn.network:
        parts.append(dsn.network)
        if dsn.address:
            parts.append(f"({dsn.address})")

    # /dbname
    parts.append(f"/{dsn.database}")

    # [?param1=value1&...&paramN=valueN]
    if dsn.parameters:
        parts.append(
            "?"
            + "&".join(
                f"{key}={query_escape(dsn.parameters[key])}"
                for key in sorted(dsn.parameters)
            )
        )

    return "".join(parts)


__all__: list[str] = [
    "format_dsn",
]
