import logging
from dataclasses import replace
from pathlib import Path

import click

from pos.domain.exceptions import DomainException
from pos.infrastructure.cli.product_commands import product_list
from pos.infrastructure.cli.shop_commands import shop
from pos.infrastructure.logging_config import configure_logging
from pos.infrastructure.settings import Settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging on stderr.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Order log file (default: orders.log or $POS_ORDER_LOG_PATH).",
)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON catalog to use instead of the built-in products.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_file: Path | None,
    catalog_path: Path | None,
) -> None:
    """POS — Point of Sale"""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    overrides = {}
    if log_file is not None:
        overrides["order_log_path"] = log_file
    if catalog_path is not None:
        overrides["catalog_path"] = catalog_path
    if overrides:
        settings = replace(settings, **overrides)

    ctx.obj = settings


# Register subcommands
cli.add_command(product_list)
cli.add_command(shop)
