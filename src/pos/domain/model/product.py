"""Product — an item that can be bought.

Products are registered in the catalog once and never change afterwards.
Cart lines and orders hold the Product value itself, so nothing done to
the catalog can reach back into a placed order.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money

PRODUCT_CODE_LENGTH = 3
MAX_PRODUCT_NAME_LENGTH = 49


@dataclass(frozen=True)
class Product:
    """A product in the catalog, identified by a three-letter code."""

    id: str
    name: str
    price: Money

    @staticmethod
    def create(id: str, name: str, price: Money) -> Product:
        """Build a product, enforcing code, name and price rules."""
        if (
            not isinstance(id, str)
            or len(id) != PRODUCT_CODE_LENGTH
            or not id.isascii()
            or not id.isalnum()
            or not id.isupper()
        ):
            raise ValidationError(
                f"Product code must be {PRODUCT_CODE_LENGTH} uppercase characters, "
                f"got {id!r}"
            )

        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Product name is required")
        name = name.strip()
        if len(name) > MAX_PRODUCT_NAME_LENGTH:
            raise ValidationError(
                f"Product name must be at most {MAX_PRODUCT_NAME_LENGTH} characters"
            )

        if not isinstance(price, Money):
            raise ValidationError("Product price must be Money")

        return Product(id=id, name=name, price=price)
