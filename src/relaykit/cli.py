#!/usr/bin/env python3
"""
Command line tools for inspecting global ids.
"""

import click

from relaykit import __version__
from relaykit.config import settings
from relaykit.globalid import GlobalIdCodec, GlobalIdError
from relaykit.logging import LOG_LEVELS, configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="relaykit")
@click.option(
    "--delimiter",
    default=None,
    help="Delimiter between type name and internal id (default: from settings)",
)
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Log level (default: from settings)",
)
@click.pass_context
def cli(ctx: click.Context, delimiter: str | None, log_level: str | None) -> None:
    """relaykit CLI - encode and decode global ids."""
    try:
        configure_logging(debug=settings.debug, log_level=log_level or settings.log_level)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    if delimiter is None:
        delimiter = settings.global_id_delimiter
    try:
        ctx.obj = GlobalIdCodec(delimiter)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--delimiter") from e


@cli.command()
@click.argument("type_name")
@click.argument("internal_id")
@click.pass_obj
def encode(codec: GlobalIdCodec, type_name: str, internal_id: str) -> None:
    """Encode TYPE_NAME and INTERNAL_ID into a global id."""
    try:
        click.echo(codec.encode(type_name, internal_id))
    except GlobalIdError as e:
        logger.debug("Encoding failed", error=str(e))
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("global_id")
@click.option(
    "--expect",
    "expected_type",
    default=None,
    help="Fail unless the global id refers to this type",
)
@click.pass_obj
def decode(codec: GlobalIdCodec, global_id: str, expected_type: str | None) -> None:
    """Decode GLOBAL_ID, printing the type name and internal id."""
    try:
        if expected_type is not None:
            internal_id = codec.decode_with_expected_type(global_id, expected_type)
            click.echo(f"{expected_type}\t{internal_id}")
        else:
            type_name, internal_id = codec.decode(global_id)
            click.echo(f"{type_name}\t{internal_id}")
    except GlobalIdError as e:
        logger.debug("Decoding failed", error=str(e), code=e.code)
        raise click.ClickException(str(e)) from e


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
