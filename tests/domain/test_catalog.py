"""Unit tests for Product and the Catalog aggregate."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import (
    CapacityExceededError,
    EntityNotFoundError,
    ValidationError,
)
from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.infrastructure.catalog_seed import DEFAULT_PRODUCTS, seeded_catalog


def _product(code: str = "LAP", name: str = "Laptop", price: str = "50000") -> Product:
    return Product.create(id=code, name=name, price=Money.of(price))


class TestProduct:

    def test_create(self):
        p = _product()
        assert p.id == "LAP"
        assert p.name == "Laptop"
        assert p.price == Money.of("50000")

    @pytest.mark.parametrize("code", ["LA", "LAPT", "lap", "L P", "", "123", "ÄBC", "LAp"])
    def test_bad_code_rejected(self, code):
        with pytest.raises(ValidationError, match="3 uppercase characters"):
            _product(code=code)

    def test_code_may_contain_digits(self):
        assert _product(code="A1B").id == "A1B"

    def test_non_string_code_rejected(self):
        with pytest.raises(ValidationError, match="3 uppercase characters"):
            _product(code=123)

    def test_name_is_stripped(self):
        assert _product(name="  Mouse ").name == "Mouse"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _product(name="   ")

    def test_non_string_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _product(name=5)

    def test_name_length_limit(self):
        assert len(_product(name="x" * 49).name) == 49
        with pytest.raises(ValidationError, match="at most 49"):
            _product(name="x" * 50)

    def test_free_product_allowed(self):
        assert _product(price="0").price.amount == Decimal("0")

    def test_products_are_immutable(self):
        p = _product()
        with pytest.raises(AttributeError):
            p.price = Money.of("1")


class TestCatalog:

    def test_find_by_id(self):
        catalog = Catalog([_product(), _product("MOU", "Mouse", "800")])
        assert catalog.find_by_id("MOU").name == "Mouse"

    def test_unknown_code_not_found(self):
        catalog = Catalog([_product()])
        with pytest.raises(EntityNotFoundError, match="'ZZZ' not found"):
            catalog.find_by_id("ZZZ")

    def test_list_keeps_registration_order(self):
        catalog = Catalog([_product("MOU", "Mouse", "800"), _product()])
        assert [p.id for p in catalog.list_all()] == ["MOU", "LAP"]

    def test_list_is_a_copy(self):
        catalog = Catalog([_product()])
        catalog.list_all().clear()
        assert len(catalog) == 1

    def test_duplicate_code_rejected(self):
        catalog = Catalog([_product()])
        with pytest.raises(ValidationError, match="already registered"):
            catalog.add(_product(name="Other Laptop"))

    def test_capacity_enforced(self):
        catalog = Catalog([_product()], capacity=1)
        with pytest.raises(CapacityExceededError, match="Catalog is full"):
            catalog.add(_product("MOU", "Mouse", "800"))
        assert catalog.codes() == ["LAP"]

    def test_contains(self):
        catalog = Catalog([_product()])
        assert "LAP" in catalog
        assert "MOU" not in catalog


class TestSeededCatalog:

    def test_has_all_default_products(self):
        catalog = seeded_catalog()
        assert len(catalog) == len(DEFAULT_PRODUCTS) == 11

    def test_laptop_price(self):
        assert seeded_catalog().find_by_id("LAP").price == Money.of("50000")

    def test_unseeded_code_not_found(self):
        with pytest.raises(EntityNotFoundError):
            seeded_catalog().find_by_id("XYZ")
