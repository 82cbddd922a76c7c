"""ShopSession — the caller-facing operations of one shopping session.

Bundles a catalog, a cart, an order ledger and an order log sink and
exposes one method per operation.  Methods return DTOs or raise a
DomainException subclass; nothing here prints.
"""

from __future__ import annotations

from pos.application.add_to_cart import AddToCartHandler
from pos.application.checkout import CheckoutHandler
from pos.application.dto import (
    CartDTO,
    CartLineDTO,
    OrderDTO,
    PaymentOptionDTO,
    ProductDTO,
)
from pos.application.list_orders import ListOrdersHandler
from pos.application.list_products import ListProductsHandler
from pos.application.view_cart import ViewCartHandler
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog
from pos.domain.model.payment import PAYMENT_METHODS
from pos.domain.repository.order_ledger import OrderLedger
from pos.domain.repository.order_log_sink import OrderLogSink


class ShopSession:

    def __init__(
        self,
        catalog: Catalog,
        cart: Cart,
        ledger: OrderLedger,
        sink: OrderLogSink,
    ) -> None:
        self.catalog = catalog
        self.cart = cart
        self.ledger = ledger
        self.sink = sink

    def list_products(self) -> list[ProductDTO]:
        return ListProductsHandler(self.catalog).handle()

    def add_to_cart(self, code: str, quantity: int) -> CartLineDTO:
        return AddToCartHandler(self.catalog, self.cart).handle(code, quantity)

    def view_cart(self) -> CartDTO:
        return ViewCartHandler(self.cart).handle()

    def checkout(self, payment_index: int) -> OrderDTO:
        return CheckoutHandler(self.cart, self.ledger, self.sink).handle(payment_index)

    def list_orders(self) -> list[OrderDTO]:
        return ListOrdersHandler(self.ledger).handle()

    @staticmethod
    def payment_options() -> list[PaymentOptionDTO]:
        return [
            PaymentOptionDTO(index=i, name=method().name)
            for i, method in enumerate(PAYMENT_METHODS, start=1)
        ]

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        self.sink.close()

    def __enter__(self) -> ShopSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
