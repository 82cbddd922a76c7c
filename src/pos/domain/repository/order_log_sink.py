"""Abstract write-only sink for committed orders.

Receives one record per committed order and is never read back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderLogSink(ABC):

    @abstractmethod
    def record(self, order_id: int, payment_method: str) -> None:
        """Write one entry.  Raises SinkUnavailableError on failure."""

    def close(self) -> None:
        """Release any underlying resource.  Safe to call twice."""
