# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""DSN Parse Error Classes.

This module defines the error classes raised by ``parse_dsn``. Every error
is a structural, non-retryable validation failure of the input string: the
parse is aborted and no partial record is returned.

Error Hierarchy:
    ValueError
    └── DsnParseError (base parse error)
        ├── NoSlashError
        ├── UnterminatedAddressError
        ├── UnescapedValueError
        └── QueryDecodeError

All errors:
    - Extend ValueError, so callers that only expect bad input can catch that
    - Use EnumDsnErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Never carry the raw DSN or the password in message or context
"""

from typing import ClassVar, Optional
from uuid import UUID

from omnibase_dsn.enums import EnumDsnErrorCode
from omnibase_dsn.errors.model_dsn_error_context import ModelDsnErrorContext


class DsnParseError(ValueError):
    """Base error class for DSN parse failures.

    Structured Fields (via ModelDsnErrorContext):
        operation: Operation being performed
        target_name: Component that detected the failure
        position: Character index where the scan failed
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelDsnErrorContext(operation="parse_dsn", position=4)
        >>> raise DsnParseError("invalid DSN", context=context)
    """

    default_message: ClassVar[str] = "invalid DSN"
    default_error_code: ClassVar[Optional[EnumDsnErrorCode]] = None

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[EnumDsnErrorCode] = None,
        context: Optional[ModelDsnErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize DsnParseError with structured fields.

        Args:
            message: Human-readable error message (defaults to the class message)
            error_code: Error code (defaults to the class error code)
            context: Bundled parse context (operation, position, etc.)
            **extra_context: Additional context information
        """
        self.message: str = message or self.default_message
        self.error_code: Optional[EnumDsnErrorCode] = (
            error_code or self.default_error_code
        )
        self.context: Optional[ModelDsnErrorContext] = context
        self.extra_context: dict[str, object] = dict(extra_context)
        super().__init__(self.message)

    @property
    def correlation_id(self) -> Optional[UUID]:
        return self.context.correlation_id if self.context is not None else None

    @property
    def context_dict(self) -> dict[str, object]:
        """Flatten error code, context model and extra context into one dict."""
        structured: dict[str, object] = {}
        if self.error_code is not None:
            structured["error_code"] = self.error_code.value
        if self.context is not None:
            structured.update(self.context.model_dump(exclude_none=True))
        structured.update(self.extra_context)
        return structured

    def __str__(self) -> str:
        return self.message


class NoSlashError(DsnParseError):
    """Raised when a non-empty DSN contains no "/" at all.

    Example:
        >>> parse_dsn("root:123456@tcp(127.0.0.1:3306)")
        Traceback (most recent call last):
        NoSlashError: invalid DSN: missing the slash separating the database name
    """

    default_message = "invalid DSN: missing the slash separating the database name"
    default_error_code = EnumDsnErrorCode.NO_SLASH


class UnterminatedAddressError(DsnParseError):
    """Raised when "(" opens an address that is not closed right before "/"."""

    default_message = (
        "invalid DSN: network address not terminated (missing closing brace)"
    )
    default_error_code = EnumDsnErrorCode.UNTERMINATED_ADDRESS


class UnescapedValueError(DsnParseError):
    """Raised when the address span holds a stray ")" but does not end in one.

    The recovery is the same as for UnterminatedAddressError; the distinct
    type tells the caller a value was probably left unescaped.
    """

    default_message = "invalid DSN: did you forget to escape a param value?"
    default_error_code = EnumDsnErrorCode.UNESCAPED_VALUE


class QueryDecodeError(DsnParseError):
    """Raised when a parameter value holds malformed percent-encoding.

    Only the parameter name is recorded in the context (``parameter``);
    the value itself may be a secret and is never attached.
    """

    default_message = "invalid DSN: malformed percent-encoding in parameter value"
    default_error_code = EnumDsnErrorCode.QUERY_DECODE


__all__ = [
    "DsnParseError",
    "NoSlashError",
    "QueryDecodeError",
    "UnescapedValueError",
    "UnterminatedAddressError",
]
