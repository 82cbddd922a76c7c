"""Order — the record of a completed purchase.

An Order is a frozen snapshot: the cart lines as they were at checkout,
the total charged and the payment method used.  Clearing the cart
afterwards cannot change it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import CartLine
from pos.domain.model.payment import PaymentRecord
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """A committed order.

    Use ``Order.place()`` for new orders; it checks the snapshot against
    the payment before anything is stored.
    """

    id: int
    lines: tuple[CartLine, ...]
    total: Money
    payment_method: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(
        order_id: int,
        lines: tuple[CartLine, ...] | list[CartLine],
        payment: PaymentRecord,
    ) -> Order:
        if isinstance(order_id, bool) or not isinstance(order_id, int) or order_id < 1:
            raise ValidationError(f"Order ID must be a positive integer, got {order_id!r}")

        lines = tuple(lines)
        if not lines:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for line in lines:
            total = total + line.line_total

        if payment.amount != total:
            raise ValidationError(
                f"Payment of {payment.amount} does not match order total {total}"
            )

        return Order(
            id=order_id,
            lines=lines,
            total=total,
            payment_method=payment.method_name,
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
