"""Load a catalog from a JSON file.

The file holds a list of ``{"id", "name", "price"}`` objects, in the
order the products should be listed.  Prices are strings or numbers and
are read as Decimal.
"""

from __future__ import annotations

import json
from pathlib import Path

from pos.domain.exceptions import ValidationError
from pos.domain.model.catalog import DEFAULT_CATALOG_CAPACITY, Catalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


class JsonCatalogLoader:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self, capacity: int = DEFAULT_CATALOG_CAPACITY) -> Catalog:
        return Catalog(self.load_products(), capacity=capacity)

    def load_products(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    def _to_domain(self, raw: object) -> Product:
        if not isinstance(raw, dict):
            raise ValidationError(f"{self._file_path}: each product must be an object")
        try:
            return Product.create(
                id=raw["id"],
                name=raw["name"],
                price=Money.of(raw["price"]),
            )
        except KeyError as exc:
            raise ValidationError(
                f"{self._file_path}: product is missing field {exc.args[0]!r}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ValidationError(f"Cannot read catalog file {self._file_path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ValidationError(f"Catalog file {self._file_path} is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog file {self._file_path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise ValidationError(f"{self._file_path}: expected a list of products")
        return raw
