# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for query-value percent-encoding."""

import pytest

from omnibase_dsn.errors import ModelDsnErrorContext, QueryDecodeError
from omnibase_dsn.utils import query_escape, query_unescape


class TestQueryEscape:
    """Tests for query_escape."""

    def test_unreserved_characters_untouched(self) -> None:
        """Letters, digits and "-_.~" are not encoded."""
        assert query_escape("AZaz09-_.~") == "AZaz09-_.~"

    def test_space_becomes_plus(self) -> None:
        """Spaces are form-encoded."""
        assert query_escape("a b") == "a+b"

    @pytest.mark.parametrize(
        ("raw", "encoded"),
        [
            ("/", "%2F"),
            ("&", "%26"),
            ("=", "%3D"),
            ("+", "%2B"),
            ("%", "%25"),
            ("?", "%3F"),
            ("你", "%E4%BD%A0"),
        ],
    )
    def test_reserved_characters_encoded(self, raw: str, encoded: str) -> None:
        """Everything else is encoded as uppercase UTF-8 escapes."""
        assert query_escape(raw) == encoded

    def test_lone_surrogate_does_not_raise(self) -> None:
        """Surrogates are written as their raw bytes instead of failing."""
        assert query_escape("a\ud800") == "a%ED%A0%80"


class TestQueryUnescape:
    """Tests for strict query_unescape."""

    def test_plus_becomes_space(self) -> None:
        """"+" decodes to a space."""
        assert query_unescape("a+b") == "a b"

    def test_lowercase_hex_accepted(self) -> None:
        """Escapes are case-insensitive."""
        assert query_unescape("%2f%2F") == "//"

    def test_plain_text_unchanged(self) -> None:
        """Unencoded text passes through."""
        assert query_unescape("utf8mb4") == "utf8mb4"

    @pytest.mark.parametrize("value", ["%", "%4", "%zz", "abc%g1", "%%41"])
    def test_malformed_escape_rejected(self, value: str) -> None:
        """A "%" must be followed by two hex digits."""
        with pytest.raises(QueryDecodeError):
            query_unescape(value)

    def test_invalid_utf8_rejected(self) -> None:
        """Decoded bytes must be valid UTF-8."""
        with pytest.raises(QueryDecodeError) as exc_info:
            query_unescape("%C3%28")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_lone_surrogate_rejected(self) -> None:
        """Unencoded text must itself be encodable as UTF-8."""
        with pytest.raises(QueryDecodeError) as exc_info:
            query_unescape("a\ud800b")
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_context_and_parameter_attached(self) -> None:
        """The given context and parameter name are carried by the error."""
        context = ModelDsnErrorContext(operation="decode", position=3)
        with pytest.raises(QueryDecodeError) as exc_info:
            query_unescape("%x", context=context, parameter="timeout")
        assert exc_info.value.context is context
        assert exc_info.value.extra_context == {"parameter": "timeout"}
