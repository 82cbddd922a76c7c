"""In-memory implementation of OrderLedger.

Orders live for the lifetime of the process only.
"""

from __future__ import annotations

from pos.domain.exceptions import LedgerFullError, ValidationError
from pos.domain.model.order import Order
from pos.domain.repository.order_ledger import OrderLedger

DEFAULT_LEDGER_CAPACITY = 100


class InMemoryOrderLedger(OrderLedger):

    def __init__(self, capacity: int = DEFAULT_LEDGER_CAPACITY) -> None:
        if capacity <= 0:
            raise ValidationError("Ledger capacity must be positive")
        self._capacity = capacity
        self._orders: list[Order] = []
        self._next_id = 1

    @property
    def capacity(self) -> int:
        return self._capacity

    # --- OrderLedger interface ------------------------------------------------

    def next_id(self) -> int:
        return self._next_id

    def append(self, order: Order) -> None:
        if self.is_full():
            raise LedgerFullError(f"Order history is full ({self._capacity} orders)")
        if order.id != self._next_id:
            raise ValidationError(
                f"Order #{order.id} is out of sequence; expected #{self._next_id}"
            )
        self._orders.append(order)
        self._next_id += 1

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def count(self) -> int:
        return len(self._orders)

    def is_full(self) -> bool:
        return len(self._orders) >= self._capacity
