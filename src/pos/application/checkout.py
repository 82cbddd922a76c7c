"""Application service: Checkout use case.

Walks the Checkout state machine and coordinates the three collaborators
that a purchase touches: the cart, the order ledger and the order log.

Every precondition is checked before anything changes.  If the ledger
is full or the order log cannot be written, the checkout is rejected as
a whole: no order is stored, the ID is not consumed and the cart keeps
its contents.
"""

from __future__ import annotations

import structlog

from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.exceptions import LedgerFullError
from pos.domain.model.cart import Cart
from pos.domain.model.checkout import Checkout
from pos.domain.repository.order_ledger import OrderLedger
from pos.domain.repository.order_log_sink import OrderLogSink

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart: Cart,
        ledger: OrderLedger,
        sink: OrderLogSink,
    ) -> None:
        self._cart = cart
        self._ledger = ledger
        self._sink = sink

    def handle(self, payment_index: int) -> OrderDTO:
        """Check out the cart with the payment method at *payment_index*.

        Steps:
        1. Review the cart (fails on an empty cart).
        2. Select the payment method (fails on an unknown index).
        3. Make sure the ledger has room.
        4. Charge the total and snapshot the cart into an Order.
        5. Write the order log entry.
        6. Append to the ledger, then clear the cart.
        """
        checkout = Checkout(self._cart)
        checkout.review()
        method = checkout.select_payment(payment_index)

        if self._ledger.is_full():
            logger.warning("Checkout rejected, order history full", orders=self._ledger.count())
            raise LedgerFullError(
                f"Order history is full ({self._ledger.count()} orders); "
                f"checkout cancelled"
            )

        order = checkout.commit(self._ledger.next_id())

        self._sink.record(order.id, order.payment_method)
        self._ledger.append(order)
        self._cart.clear()

        logger.info(
            "Order committed",
            order_id=order.id,
            payment_method=method.name,
            total=str(order.total.amount),
            lines=len(order.lines),
        )
        return order_to_dto(order)
