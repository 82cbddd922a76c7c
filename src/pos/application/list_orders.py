"""Application service: List Orders use case (query)."""

from __future__ import annotations

from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.repository.order_ledger import OrderLedger


class ListOrdersHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(order) for order in self._ledger.list_all()]
