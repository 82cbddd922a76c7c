"""Abstract ledger for committed Orders.

Append-only: there is no update or removal.  Order identifiers come from
the ledger so they stay sequential for the whole process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.order import Order


class OrderLedger(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the ID the next appended order must carry."""

    @abstractmethod
    def append(self, order: Order) -> None:
        """Store a committed order at the end of the history."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in commit order."""

    @abstractmethod
    def count(self) -> int:
        """Return how many orders have been committed."""

    @abstractmethod
    def is_full(self) -> bool:
        """True when ``append`` would be rejected for lack of room."""
