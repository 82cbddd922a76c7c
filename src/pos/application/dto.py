"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is passed both
formatted (for display) and as the exact Decimal (for callers that
compute with it).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.cart import CartLine
from pos.domain.model.order import Order
from pos.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str  # formatted, e.g. "₱800.00"


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart or order line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str
    total_amount: Decimal
    item_count: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a committed order as displayed to the user."""

    id: int
    payment_method: str
    lines: list[CartLineDTO]
    total: str
    total_amount: Decimal
    created_at: str


@dataclass(frozen=True)
class PaymentOptionDTO:
    index: int
    name: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=str(product.price))


def line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        product_id=line.product.id,
        product_name=line.product.name,
        quantity=line.quantity.value,
        unit_price=str(line.product.price),
        line_total=str(line.line_total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        payment_method=order.payment_method,
        lines=[line_to_dto(line) for line in order.lines],
        total=str(order.total),
        total_amount=order.total.amount,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
