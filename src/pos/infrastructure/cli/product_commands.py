"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.dto import ProductDTO
from pos.application.list_products import ListProductsHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import catalog
from pos.infrastructure.settings import Settings


def display_products(products: list[ProductDTO]) -> None:
    """Shared formatting for the product table."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Code':<6} {'Name':<22} {'Price':>14}")
    click.echo("-" * 44)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<22} {p.price:>14}")


@click.command("products")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        handler = ListProductsHandler(catalog(settings))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_products(handler.handle())
