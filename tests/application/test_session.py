"""End-to-end tests through ShopSession."""

from decimal import Decimal

import pytest

from pos.application.session import ShopSession
from pos.domain.exceptions import EmptyCartError, EntityNotFoundError
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.infrastructure.catalog_seed import seeded_catalog
from pos.infrastructure.persistence.in_memory_order_ledger import (
    InMemoryOrderLedger,
)
from tests.fakes import RecordingLogSink


def _session(catalog: Catalog | None = None) -> ShopSession:
    return ShopSession(
        catalog=catalog if catalog is not None else seeded_catalog(),
        cart=Cart(),
        ledger=InMemoryOrderLedger(),
        sink=RecordingLogSink(),
    )


class TestShopSession:

    def test_laptop_and_mice(self):
        catalog = Catalog([
            Product.create("LAP", "Laptop", Money.of("50000")),
            Product.create("MOU", "Mouse", Money.of("800")),
        ])
        session = _session(catalog)

        session.add_to_cart("LAP", 1)
        session.add_to_cart("MOU", 2)
        assert session.view_cart().total_amount == Decimal("51600")

        order = session.checkout(1)
        assert order.id == 1
        assert order.total_amount == Decimal("51600")
        assert order.payment_method == "Cash"

        assert session.cart.is_empty()
        with pytest.raises(EmptyCartError):
            session.view_cart()

        orders = session.list_orders()
        assert len(orders) == 1
        assert orders[0].id == 1
        assert [(l.product_id, l.quantity) for l in orders[0].lines] == [("LAP", 1), ("MOU", 2)]

    def test_list_products_in_seed_order(self):
        products = _session().list_products()
        assert [p.id for p in products][:3] == ["LAP", "PHN", "HDP"]
        assert products[0].price == "₱50,000.00"

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            _session().add_to_cart("XYZ", 1)

    def test_payment_options(self):
        options = ShopSession.payment_options()
        assert [(o.index, o.name) for o in options] == [
            (1, "Cash"),
            (2, "Credit/Debit Card"),
            (3, "GCash"),
        ]

    def test_orders_listed_in_commit_order(self):
        session = _session()
        session.add_to_cart("USB", 1)
        session.checkout(3)
        session.add_to_cart("TAB", 1)
        session.checkout(2)
        assert [(o.id, o.payment_method) for o in session.list_orders()] == [
            (1, "GCash"),
            (2, "Credit/Debit Card"),
        ]

    def test_context_manager_closes_sink(self):
        session = _session()
        with session:
            pass
        assert session.sink.closed
