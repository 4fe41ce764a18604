# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Strongly-typed MySQL-style DSN record.

This module provides a Pydantic model for the fields of a MySQL-style Data
Source Name::

    [user[:password]@][net[(addr)]]/dbname[?param1=value1&paramN=valueN]

The record is produced by ``parse_dsn`` or built directly by a caller, and
rendered back into canonical string form by ``ModelDSN.format_dsn``.

Example:
    >>> from omnibase_dsn.types import ModelDSN
    >>> dsn = ModelDSN(
    ...     user="root",
    ...     password="123456",
    ...     network="tcp",
    ...     address="127.0.0.1:3306",
    ...     database="Test",
    ...     parameters={"charset": "utf8"},
    ... )
    >>> dsn.format_dsn()
    'root:123456@tcp(127.0.0.1:3306)/Test?charset=utf8'

Note:
    ``parameters=None`` and ``parameters={}`` are different values. The parser
    leaves the mapping as ``None`` unless the query string holds at least one
    ``key=value`` pair, and the two compare unequal so records built from
    reference vectors keep that distinction.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ModelDSN"]


class ModelDSN(BaseModel):
    """Parsed MySQL-style DSN.

    The model is frozen: formatting and redaction never mutate a record,
    they read it or return a copy.

    Attributes:
        user: User name. Empty means the credentials section is absent.
        password: Password. Only emitted when ``user`` is non-empty.
            Note: Handle with care as this contains sensitive credentials.
        network: Network type such as ``tcp`` or ``unix``. Empty means the
            protocol part is absent.
        address: Network address. Only emitted when ``network`` is non-empty.
        database: Database name. May be empty.
        parameters: Decoded connection parameters, or ``None`` when the DSN
            carried no query pair.
    """

    user: str = Field(
        default="",
        description="User name. Empty means no credentials section.",
    )
    password: str = Field(
        default="",
        description="Password (requires user). Handle with care.",
    )
    network: str = Field(
        default="",
        description="Network type, e.g. 'tcp' or 'unix'.",
    )
    address: str = Field(
        default="",
        description="Network address (requires network).",
    )
    database: str = Field(
        default="",
        description="Database name.",
    )
    parameters: Optional[dict[str, str]] = Field(
        default=None,
        description="Decoded connection parameters; None when absent.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def has_parameters(self) -> bool:
        """True when a parameter mapping is present, even an empty one."""
        return self.parameters is not None

    def format_dsn(self) -> str:
        """Render this record as a canonical DSN string.

        See ``omnibase_dsn.utils.format_dsn`` for the exact rules.
        """
        # Lazy import to avoid circular dependency (types -> utils -> types)
        from omnibase_dsn.utils.util_dsn_formatter import format_dsn

        return format_dsn(self)

    def redacted(self, mask: str = "***") -> "ModelDSN":
        """Return a copy with the password replaced by ``mask``.

        An empty password stays empty so the redacted form does not suggest
        credentials that were never there.
        """
        if not self.password:
            return self
        return self.model_copy(update={"password": mask})
