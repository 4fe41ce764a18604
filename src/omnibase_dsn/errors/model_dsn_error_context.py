# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""DSN Error Context Configuration Model.

This module defines the configuration model for DSN parse error context,
bundling the structured fields every parse error carries so the error
constructors keep a small parameter list.
"""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelDsnErrorContext(BaseModel):
    """Configuration model for DSN parse error context.

    Attributes:
        operation: Operation being performed (parse_dsn, parse_params, ...)
        target_name: Component that detected the failure
        position: Character index in the DSN where the scan failed
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelDsnErrorContext.with_correlation(
        ...     operation="parse_dsn",
        ...     target_name="dsn_parser",
        ...     position=12,
        ... )
        >>> raise NoSlashError(context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (parse_dsn, parse_params, etc.)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Component that detected the failure",
    )
    position: Optional[int] = Field(
        default=None,
        ge=0,
        description="Character index in the DSN where the scan failed",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> "ModelDsnErrorContext":
        """Create a context, generating a UUID4 when no correlation ID is given.

        Args:
            correlation_id: Correlation ID to propagate, or ``None`` to
                generate a new one.
            **kwargs: Remaining context fields.

        Returns:
            A context whose ``correlation_id`` is never ``None``.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelDsnErrorContext"]
