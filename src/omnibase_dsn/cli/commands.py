"""
omnibase-dsn CLI Commands.

Provides a CLI interface for parsing, formatting, normalizing and sanitizing
MySQL-style DSN strings.
"""

from __future__ import annotations

import json
import logging
from uuid import uuid4

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from omnibase_dsn.cli.model_dsn_cli_config import ModelDsnCliConfig
from omnibase_dsn.errors import DsnParseError
from omnibase_dsn.types import ModelDSN
from omnibase_dsn.utils import parse_dsn, sanitize_dsn

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (default: OMNIBASE_DSN_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """MySQL-style DSN tools."""
    config = ModelDsnCliConfig.from_env()
    effective_level = (log_level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


def _resolve_dsn(dsn: str | None, config: ModelDsnCliConfig) -> str:
    if dsn is not None:
        return dsn
    if config.dsn is not None:
        logger.debug("Using DSN from OMNIBASE_DSN")
        return config.dsn
    raise click.UsageError("Missing DSN argument and OMNIBASE_DSN is not set.")


def _parse_or_exit(dsn: str) -> ModelDSN:
    correlation_id = uuid4()
    try:
        return parse_dsn(dsn, correlation_id=correlation_id)
    except DsnParseError as e:
        # Never echo the DSN itself, it may hold credentials
        logger.debug(
            "DSN parse failed: error_code=%s, correlation_id=%s",
            e.error_code.value if e.error_code else None,
            correlation_id,
        )
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1) from e


@cli.command("parse")
@click.argument("dsn", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the fields as JSON.")
@click.option(
    "--show-password",
    is_flag=True,
    help="Print the password instead of the mask.",
)
@click.pass_obj
def parse_cmd(
    config: ModelDsnCliConfig,
    dsn: str | None,
    as_json: bool,
    show_password: bool,
) -> None:
    """Parse DSN and print its fields."""
    parsed = _parse_or_exit(_resolve_dsn(dsn, config))
    if not show_password:
        parsed = parsed.redacted(config.mask)
    logger.debug(
        "Parsed DSN: network=%r, has_parameters=%s",
        parsed.network,
        parsed.has_parameters,
    )

    if as_json:
        click.echo(json.dumps(parsed.model_dump(), sort_keys=True))
        return

    table = Table(title="DSN")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field_name in ("user", "password", "network", "address", "database"):
        table.add_row(field_name, Text(getattr(parsed, field_name)))
    if parsed.parameters is None:
        table.add_row("parameters", Text("(none)", style="dim"))
    else:
        for key in sorted(parsed.parameters):
            table.add_row(f"?{key}", Text(parsed.parameters[key]))
    console.print(table)


@cli.command("format")
@click.option("--user", default="", help="User name.")
@click.option("--password", default="", help="Password (requires --user).")
@click.option("--net", "network", default="", help="Network type, e.g. tcp.")
@click.option("--addr", "address", default="", help="Network address (requires --net).")
@click.option("--db", "database", default="", help="Database name.")
@click.option(
    "--param",
    "params",
    multiple=True,
    metavar="KEY=VALUE",
    help="Connection parameter, repeatable. Values are given unescaped.",
)
def format_cmd(
    user: str,
    password: str,
    network: str,
    address: str,
    database: str,
    params: tuple[str, ...],
) -> None:
    """Build a canonical DSN from its fields."""
    parameters: dict[str, str] | None = None
    for item in params:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(
                f"expected KEY=VALUE, got {item!r}", param_hint="--param"
            )
        if parameters is None:
            parameters = {}
        parameters[key] = value

    dsn = ModelDSN(
        user=user,
        password=password,
        network=network,
        address=address,
        database=database,
        parameters=parameters,
    )
    click.echo(dsn.format_dsn())


@cli.command("normalize")
@click.argument("dsn", required=False)
@click.pass_obj
def normalize_cmd(config: ModelDsnCliConfig, dsn: str | None) -> None:
    """Parse DSN and print it in canonical form."""
    click.echo(_parse_or_exit(_resolve_dsn(dsn, config)).format_dsn())


@cli.command("sanitize")
@click.argument("dsn", required=False)
@click.pass_obj
def sanitize_cmd(config: ModelDsnCliConfig, dsn: str | None) -> None:
    """Print DSN with its password masked."""
    click.echo(sanitize_dsn(_resolve_dsn(dsn, config), mask=config.mask))


if __name__ == "__main__":
    cli()
