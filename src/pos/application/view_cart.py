"""Application service: View Cart use case (query)."""

from __future__ import annotations

from pos.application.dto import CartDTO, line_to_dto
from pos.domain.exceptions import EmptyCartError
from pos.domain.model.cart import Cart


class ViewCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        if self._cart.is_empty():
            raise EmptyCartError("Shopping cart is empty")

        total = self._cart.total()
        return CartDTO(
            lines=[line_to_dto(line) for line in self._cart.snapshot_lines()],
            total=str(total),
            total_amount=total.amount,
            item_count=self._cart.item_count,
        )
