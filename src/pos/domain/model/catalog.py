"""Catalog aggregate — the fixed set of products on sale.

Filled once at startup from seed data and only read afterwards.  Lookup
is a linear scan; catalogs hold a few dozen products at most.
"""

from __future__ import annotations

from pos.domain.exceptions import (
    CapacityExceededError,
    EntityNotFoundError,
    ValidationError,
)
from pos.domain.model.product import Product

DEFAULT_CATALOG_CAPACITY = 50


class Catalog:
    """Products in registration order.

    Invariants:
    - product codes are unique
    - never more than ``capacity`` products
    """

    def __init__(
        self,
        products: list[Product] | None = None,
        capacity: int = DEFAULT_CATALOG_CAPACITY,
    ) -> None:
        if capacity <= 0:
            raise ValidationError("Catalog capacity must be positive")
        self._capacity = capacity
        self._products: list[Product] = []
        for product in products or []:
            self.add(product)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, product: Product) -> None:
        """Register a product at the end of the catalog."""
        if any(p.id == product.id for p in self._products):
            raise ValidationError(f"Product code '{product.id}' already registered")
        if len(self._products) >= self._capacity:
            raise CapacityExceededError(
                f"Catalog is full ({self._capacity} products)"
            )
        self._products.append(product)

    def find_by_id(self, code: str) -> Product:
        for product in self._products:
            if product.id == code:
                return product
        raise EntityNotFoundError(f"Product code '{code}' not found")

    def list_all(self) -> list[Product]:
        return list(self._products)

    def codes(self) -> list[str]:
        return [p.id for p in self._products]

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, code: object) -> bool:
        return any(p.id == code for p in self._products)
