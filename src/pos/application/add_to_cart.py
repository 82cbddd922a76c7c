"""Application service: Add To Cart use case.

Resolves the product code against the catalog and hands the product to
the cart, which owns the merge and limit rules.
"""

from __future__ import annotations

import structlog

from pos.application.dto import CartLineDTO, line_to_dto
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, code: str, quantity: int) -> CartLineDTO:
        """Add *quantity* of the product with *code* to the cart.

        Returns the cart line after the addition, so a repeated product
        reports its combined quantity.
        """
        product = self._catalog.find_by_id(code)
        line = self._cart.add_item(product, quantity)

        logger.debug(
            "Added to cart",
            product_id=product.id,
            added=quantity,
            line_quantity=line.quantity.value,
            cart_lines=self._cart.line_count,
        )
        return line_to_dto(line)
