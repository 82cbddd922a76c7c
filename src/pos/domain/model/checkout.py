"""Checkout — the state machine that turns a cart into an order.

    BROWSING -> REVIEWING -> PAYMENT_SELECTED -> COMMITTED

A failed step leaves the checkout in the state it was in.  COMMITTED is
terminal; the next purchase starts with a fresh Checkout.
"""

from __future__ import annotations

from enum import Enum

from pos.domain.exceptions import EmptyCartError, ValidationError
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.order import Order
from pos.domain.model.payment import PaymentMethod, payment_method_for


class CheckoutStatus(Enum):
    BROWSING = "BROWSING"
    REVIEWING = "REVIEWING"
    PAYMENT_SELECTED = "PAYMENT_SELECTED"
    COMMITTED = "COMMITTED"


class Checkout:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart
        self.status = CheckoutStatus.BROWSING
        self.payment_method: PaymentMethod | None = None

    # --- State transitions ----------------------------------------------------

    def review(self) -> tuple[CartLine, ...]:
        """Transition BROWSING -> REVIEWING.  Needs a non-empty cart."""
        self._expect(CheckoutStatus.BROWSING)
        if self._cart.is_empty():
            raise EmptyCartError("Shopping cart is empty")
        self.status = CheckoutStatus.REVIEWING
        return self._cart.snapshot_lines()

    def select_payment(self, index: int) -> PaymentMethod:
        """Transition REVIEWING -> PAYMENT_SELECTED."""
        self._expect(CheckoutStatus.REVIEWING)
        method = payment_method_for(index)
        self.payment_method = method
        self.status = CheckoutStatus.PAYMENT_SELECTED
        return method

    def commit(self, order_id: int) -> Order:
        """Transition PAYMENT_SELECTED -> COMMITTED.

        Charges the cart total and snapshots the cart into an Order.
        Storing the order and clearing the cart are up to the caller.
        """
        self._expect(CheckoutStatus.PAYMENT_SELECTED)
        lines = self._cart.snapshot_lines()
        payment = self.payment_method.charge(self._cart.total())
        order = Order.place(order_id=order_id, lines=lines, payment=payment)

        self.status = CheckoutStatus.COMMITTED
        return order

    # --- Internal helpers -----------------------------------------------------

    def _expect(self, expected: CheckoutStatus) -> None:
        if self.status != expected:
            raise ValidationError(
                f"Cannot proceed with checkout — current status is "
                f"{self.status.value}, expected {expected.value}"
            )
