# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""MySQL-style DSN parser.

Parses::

    [user[:password]@][net[(addr)]]/dbname[?param1=value1&paramN=valueN]

into a ``ModelDSN``. The parser is an index scanner over the raw string.
Scan direction matters because passwords and addresses may legally contain
``/``, ``@``, ``:`` or ``(``:

    - the database separator is the LAST ``/`` in the whole string
    - the credentials end at the LAST ``@`` before that separator
    - the password starts after the FIRST ``:`` of the credentials
    - the address starts after the FIRST ``(`` of the protocol segment and
      must end with the ``)`` immediately before the separator
    - the query string starts after the FIRST ``?`` after the separator

The empty string is a valid DSN and yields an all-empty record. Any other
input without ``/`` is rejected.

Security:
    Error messages and error context never contain the DSN, the password or
    parameter values. Only character positions and parameter names are
    recorded.
"""

from __future__ import annotations

from uuid import UUID

from omnibase_dsn.errors import (
    ModelDsnErrorContext,
    NoSlashError,
    UnescapedValueError,
    UnterminatedAddressError,
)
from omnibase_dsn.types import ModelDSN
from omnibase_dsn.utils.util_query_escape import query_unescape

_TARGET_NAME = "dsn_parser"


def _error_context(
    operation: str,
    position: int,
    correlation_id: UUID | None,
) -> ModelDsnErrorContext:
    return ModelDsnErrorContext.with_correlation(
        correlation_id=correlation_id,
        operation=operation,
        target_name=_TARGET_NAME,
        position=position,
    )


def parse_dsn_params(
    query: str,
    *,
    offset: int = 0,
    correlation_id: UUID | None = None,
) -> dict[str, str] | None:
    """Parse the query string of a DSN (the text after ``?``).

    Each ``&``-separated pair is split on its first ``=``. Pairs without
    ``=`` are skipped. Keys are kept verbatim, values are percent-decoded,
    and later duplicates overwrite earlier ones.

    Args:
        query: Query string without the leading ``?``.
        offset: Position of ``query`` inside the full DSN, used for error
            positions.
        correlation_id: Optional correlation ID for error context.

    Returns:
        The parameter mapping, or ``None`` when no pair holds an ``=``.
        An empty mapping is never returned.

    Raises:
        QueryDecodeError: If a value holds malformed percent-encoding.
    """
    params: dict[str, str] | None = None
    position = offset
    for pair in query.split("&"):
        key, sep, value = pair.partition("=")
        if sep:
            # lazy init
            if params is None:
                params = {}
            params[key] = query_unescape(
                value,
                context=_error_context(
                    "parse_dsn_params",
                    position + len(key) + 1,
                    correlation_id,
                ),
                parameter=key,
            )
        position += len(pair) + 1
    return params


def parse_dsn(
    dsn: str,
    *,
    correlation_id: UUID | None = None,
) -> ModelDSN:
    """Parse a MySQL-style DSN string into a ``ModelDSN``.

    Args:
        dsn: DSN string, e.g. ``root:pw@tcp(127.0.0.1:3306)/app?charset=utf8``.
        correlation_id: Optional correlation ID for distributed tracing.
            If provided, the ID is propagated into error context. If
            ``None``, a new UUID is generated when an error is raised.

    Returns:
        ModelDSN with the parsed fields. ``parameters`` is ``None`` unless
        the query string held at least one ``key=value`` pair.

    Raises:
        NoSlashError: If a non-empty DSN contains no ``/``.
        UnterminatedAddressError: If ``(`` opens an address but the
            character before the database separator is not ``)``.
        UnescapedValueError: Same as above, but a ``)`` appears inside the
            address span, which usually means a value was not escaped.
        QueryDecodeError: If a parameter value holds malformed
            percent-encoding.

    Example:
        >>> cfg = parse_dsn("root:123456@tcp(127.0.0.1:3306)/Test?charset=utf8")
        >>> cfg.address, cfg.database, cfg.parameters
        ('127.0.0.1:3306', 'Test', {'charset': 'utf8'})
    """
    if not dsn:
        return ModelDSN()

    # Find the last '/' (the password or the net addr might contain a '/')
    slash = dsn.rfind("/")
    if slash < 0:
        raise NoSlashError(
            context=_error_context("parse_dsn", len(dsn), correlation_id),
        )

    user = password = network = address = ""

    if slash > 0:
        # [username[:password]@][protocol[(address)]]
        at = dsn.rfind("@", 0, slash)
        if at >= 0:
            colon = dsn.find(":", 0, at)
            if colon >= 0:
                user, password = dsn[:colon], dsn[colon + 1 : at]
            else:
                user = dsn[:at]

        # protocol segment is dsn[at + 1 : slash]; at is -1 when absent
        net_start = at + 1
        paren = dsn.find("(", net_start, slash)
        if paren >= 0:
            # an address must be closed right before the database separator
            if dsn[slash - 1] != ")":
                if ")" in dsn[paren + 1 : slash]:
                    raise UnescapedValueError(
                        context=_error_context(
                            "parse_dsn", slash - 1, correlation_id
                        ),
                    )
                raise UnterminatedAddressError(
                    context=_error_context("parse_dsn", slash, correlation_id),
                )
            address = dsn[paren + 1 : slash - 1]
            network = dsn[net_start:paren]
        else:
            network = dsn[net_start:slash]

    # dbname[?param1=value1&...&paramN=valueN]
    parameters: dict[str, str] | None = None
    question = dsn.find("?", slash + 1)
    if question >= 0:
        database = dsn[slash + 1 : question]
        parameters = parse_dsn_params(
            dsn[question + 1 :],
            offset=question + 1,
            correlation_id=correlation_id,
        )
    else:
        database = dsn[slash + 1 :]

    return ModelDSN(
        user=user,
        password=password,
        network=network,
        address=address,
        database=database,
        parameters=parameters,
    )


__all__: list[str] = [
    "parse_dsn",
    "parse_dsn_params",
]
