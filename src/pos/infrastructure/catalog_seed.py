"""Products the store opens with."""

from __future__ import annotations

from pos.domain.model.catalog import DEFAULT_CATALOG_CAPACITY, Catalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money

DEFAULT_PRODUCTS: tuple[tuple[str, str, str], ...] = (
    ("LAP", "Laptop", "50000"),
    ("PHN", "Smartphone", "20000"),
    ("HDP", "Headphones", "3000"),
    ("KEY", "Keyboard", "1500"),
    ("MOU", "Mouse", "800"),
    ("MON", "Monitor", "12000"),
    ("TAB", "Tablet", "15000"),
    ("SPK", "Bluetooth Speaker", "2500"),
    ("POW", "Power Bank", "1800"),
    ("USB", "USB Flash Drive", "500"),
    ("HDD", "External Hard Drive", "4000"),
)


def default_products() -> list[Product]:
    return [
        Product.create(id=code, name=name, price=Money.of(price))
        for code, name, price in DEFAULT_PRODUCTS
    ]


def seeded_catalog(capacity: int = DEFAULT_CATALOG_CAPACITY) -> Catalog:
    return Catalog(default_products(), capacity=capacity)
