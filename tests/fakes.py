"""In-memory fakes for testing.

These implement the same abstract interfaces as the real adapters but
keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from pos.domain.exceptions import SinkUnavailableError
from pos.domain.repository.order_log_sink import OrderLogSink


class RecordingLogSink(OrderLogSink):

    def __init__(self) -> None:
        self.records: list[tuple[int, str]] = []
        self.closed = False

    def record(self, order_id: int, payment_method: str) -> None:
        self.records.append((order_id, payment_method))

    def close(self) -> None:
        self.closed = True


class FailingLogSink(OrderLogSink):
    """A sink whose backing file can never be opened."""

    def record(self, order_id: int, payment_method: str) -> None:
        raise SinkUnavailableError("Failed to open order log orders.log")
