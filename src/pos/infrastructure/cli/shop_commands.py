"""Interactive shopping session.

The menu loop is the only place that talks to the terminal.  Prompts do
the input validation (click types re-ask until the value is acceptable);
domain errors are shown and the loop carries on.
"""

from __future__ import annotations

import click

from pos.application.dto import CartDTO, CartLineDTO, OrderDTO
from pos.application.session import ShopSession
from pos.domain.exceptions import (
    CapacityExceededError,
    DomainException,
    EmptyCartError,
    EntityNotFoundError,
    InvalidSelectionError,
    LedgerFullError,
    QuantityOverflowError,
    SinkUnavailableError,
    ValidationError,
)
from pos.infrastructure.bootstrap import shop_session
from pos.infrastructure.cli.product_commands import display_products
from pos.infrastructure.settings import Settings

MAIN_MENU = ("View products", "View cart", "View orders", "Exit")

# Most specific first.
_ERROR_TITLES: tuple[tuple[type[DomainException], str], ...] = (
    (EntityNotFoundError, "Product not found"),
    (QuantityOverflowError, "Quantity too large"),
    (LedgerFullError, "Order history full"),
    (CapacityExceededError, "Cart full"),
    (EmptyCartError, "Cart empty"),
    (InvalidSelectionError, "Invalid selection"),
    (SinkUnavailableError, "Order log unavailable"),
    (ValidationError, "Invalid input"),
)


def _show_error(exc: DomainException) -> None:
    title = next(
        (t for kind, t in _ERROR_TITLES if isinstance(exc, kind)),
        "Error",
    )
    click.echo(f"! {title}: {exc}")


# --- Display -----------------------------------------------------------------


def _display_lines(lines: list[CartLineDTO], total: str) -> None:
    click.echo(f"  {'Code':<6} {'Product':<22} {'Qty':>5} {'Price':>14} {'Total':>16}")
    click.echo(f"  {'-'*67}")
    for line in lines:
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<22} {line.quantity:>5} "
            f"{line.unit_price:>14} {line.line_total:>16}"
        )
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Total':<50} {total:>16}")


def _display_cart(cart: CartDTO) -> None:
    click.echo(f"Shopping cart ({cart.item_count} items)")
    _display_lines(cart.lines, cart.total)


def _display_order(order: OrderDTO) -> None:
    click.echo(f"Order #{order.id}  (paid with {order.payment_method})")
    click.echo(f"Placed: {order.created_at}")
    _display_lines(order.lines, order.total)


# --- Menu actions ------------------------------------------------------------


def _prompt_code(session: ShopSession) -> str:
    """Ask until the answer is a catalog code or ``0``, trimmed and uppercased."""
    while True:
        code = click.prompt("Product code to add (0 to go back)", type=str)
        code = code.strip().upper()
        if code == "0" or code in session.catalog:
            return code
        click.echo(f"! Product not found: Product code '{code}' not found")


def _browse(session: ShopSession) -> None:
    while True:
        click.echo()
        display_products(session.list_products())
        code = _prompt_code(session)
        if code == "0":
            return

        quantity = click.prompt("Quantity", type=click.IntRange(min=1))
        try:
            line = session.add_to_cart(code, quantity)
        except DomainException as exc:
            _show_error(exc)
        else:
            click.echo(
                f"Added {quantity} x {line.product_name} "
                f"({line.quantity} in cart)."
            )

        if not click.confirm("Add another product?", default=False):
            return


def _checkout(session: ShopSession) -> None:
    options = session.payment_options()
    click.echo("Select payment method:")
    for option in options:
        click.echo(f"  {option.index}. {option.name}")
    index = click.prompt("Your choice", type=click.IntRange(1, len(options)))

    try:
        order = session.checkout(index)
    except DomainException as exc:
        _show_error(exc)
        return

    click.echo(
        f"Order #{order.id} placed — paid {order.total} with {order.payment_method}."
    )


def _view_cart(session: ShopSession) -> None:
    try:
        cart = session.view_cart()
    except EmptyCartError as exc:
        _show_error(exc)
        return

    _display_cart(cart)
    if click.confirm("Proceed to checkout?", default=False):
        _checkout(session)


def _view_orders(session: ShopSession) -> None:
    orders = session.list_orders()
    if not orders:
        click.echo("No orders yet.")
        return

    for order in orders:
        click.echo()
        _display_order(order)


_ACTIONS = {1: _browse, 2: _view_cart, 3: _view_orders}


def run_menu(session: ShopSession) -> None:
    """Run the main menu until the shopper picks Exit."""
    while True:
        click.echo()
        for i, label in enumerate(MAIN_MENU, start=1):
            click.echo(f"  {i}. {label}")
        choice = click.prompt("Enter your choice", type=click.IntRange(1, len(MAIN_MENU)))

        action = _ACTIONS.get(choice)
        if action is None:
            return
        action(session)


@click.command("shop")
@click.pass_obj
def shop(settings: Settings) -> None:
    """Start an interactive shopping session."""
    try:
        session = shop_session(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    with session:
        try:
            run_menu(session)
        except click.Abort:
            # End of input or Ctrl-C: leave like Exit would.
            click.echo()

    click.echo("Thank you for shopping!")
