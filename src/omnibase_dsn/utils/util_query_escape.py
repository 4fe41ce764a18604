# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Query-string value encoding for DSN parameters.

Parameter values are encoded with ``application/x-www-form-urlencoded``
rules: UTF-8 bytes outside ``A-Z a-z 0-9 - _ . ~`` become ``%XX`` (uppercase
hex) and a space becomes ``+``.

Decoding is strict, unlike ``urllib.parse.unquote_plus``, which passes a
malformed escape through untouched. A ``%`` that is not followed by two hex
digits, or escapes that do not form valid UTF-8, raise ``QueryDecodeError``.

Example:
    >>> query_escape("a b&c")
    'a+b%26c'
    >>> query_unescape("a+b%26c")
    'a b&c'
"""

from __future__ import annotations

import re
from typing import Final
from urllib.parse import quote_plus, unquote_plus

from omnibase_dsn.errors import ModelDsnErrorContext, QueryDecodeError

# "%" not followed by exactly two hex digits
_MALFORMED_ESCAPE: Final[re.Pattern[str]] = re.compile(r"%(?![0-9A-Fa-f]{2})")


def query_escape(value: str) -> str:
    """Percent-encode ``value`` for use in a DSN query string.

    Never raises: lone surrogates are encoded as their raw UTF-8 bytes.
    """
    return quote_plus(value, safe="", encoding="utf-8", errors="surrogatepass")


def query_unescape(
    value: str,
    *,
    context: ModelDsnErrorContext | None = None,
    parameter: str | None = None,
) -> str:
    """Decode a percent-encoded DSN query value.

    Args:
        value: Encoded value.
        context: Error context to attach if decoding fails.
        parameter: Name of the parameter being decoded, recorded in the
            error. The value itself is never recorded.

    Returns:
        The decoded value.

    Raises:
        QueryDecodeError: If ``value`` holds a malformed escape, the
            decoded bytes are not valid UTF-8, or the result cannot be
            encoded as UTF-8 (lone surrogates).
    """
    extra: dict[str, object] = {}
    if parameter is not None:
        extra["parameter"] = parameter

    if _MALFORMED_ESCAPE.search(value):
        raise QueryDecodeError(context=context, **extra)

    try:
        decoded = unquote_plus(value, encoding="utf-8", errors="strict")
        decoded.encode("utf-8", errors="strict")
    except UnicodeError as e:
        raise QueryDecodeError(context=context, **extra) from e
    return decoded


__all__: list[str] = [
    "query_escape",
    "query_unescape",
]
