"""Cart aggregate — what the shopper intends to buy this session.

The cart owns its lines.  Adding a product that is already in the cart
grows the existing line instead of creating a second one.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import (
    CapacityExceededError,
    QuantityOverflowError,
    ValidationError,
)
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity

DEFAULT_CART_CAPACITY = 100
MAX_LINE_QUANTITY = 2**31 - 1


@dataclass(frozen=True)
class CartLine:
    """One product and how many of it.  Replaced, never mutated."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Aggregate root for the session's cart.

    Invariants:
    - at most one line per product code
    - every line quantity is between 1 and ``max_quantity``
    - never more than ``capacity`` lines
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CART_CAPACITY,
        max_quantity: int = MAX_LINE_QUANTITY,
    ) -> None:
        if capacity <= 0:
            raise ValidationError("Cart capacity must be positive")
        if max_quantity <= 0:
            raise ValidationError("Maximum line quantity must be positive")
        self._capacity = capacity
        self._max_quantity = max_quantity
        self._lines: list[CartLine] = []

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> CartLine:
        """Add *quantity* units of *product* and return the resulting line.

        All checks run before the cart is touched, so a failed call
        leaves it exactly as it was.
        """
        qty = Quantity(quantity)

        index = self._index_of(product.id)
        if index is None:
            if len(self._lines) >= self._capacity:
                raise CapacityExceededError(
                    f"Cart is full ({self._capacity} different products)"
                )
            self._check_limit(product, qty.value)
            line = CartLine(product=product, quantity=qty)
            self._lines.append(line)
            return line

        existing = self._lines[index]
        self._check_limit(product, existing.quantity.value + qty.value)
        line = CartLine(product=existing.product, quantity=existing.quantity + qty)
        self._lines[index] = line
        return line

    def clear(self) -> None:
        self._lines = []

    # --- Queries --------------------------------------------------------------

    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    def is_empty(self) -> bool:
        return not self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self._lines)

    @property
    def capacity(self) -> int:
        return self._capacity

    def snapshot_lines(self) -> tuple[CartLine, ...]:
        """Immutable copy of the lines; later cart changes do not show up."""
        return tuple(self._lines)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: str) -> int | None:
        for i, line in enumerate(self._lines):
            if line.product.id == product_id:
                return i
        return None

    def _check_limit(self, product: Product, new_quantity: int) -> None:
        if new_quantity > self._max_quantity:
            raise QuantityOverflowError(
                f"Quantity of {product.name} would exceed {self._max_quantity}"
            )
