"""Unit tests for the Cart aggregate."""

import pytest

from pos.domain.exceptions import (
    CapacityExceededError,
    QuantityOverflowError,
    ValidationError,
)
from pos.domain.model.cart import Cart
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity

LAPTOP = Product.create(id="LAP", name="Laptop", price=Money.of("50000"))
MOUSE = Product.create(id="MOU", name="Mouse", price=Money.of("800"))
CABLE = Product.create(id="CBL", name="Cable", price=Money.of("19.99"))


class TestAddItem:

    def test_new_cart_is_empty(self):
        cart = Cart()
        assert cart.is_empty()
        assert cart.total() == Money.zero()

    @pytest.mark.parametrize("qty", [1, 2, 7, 100])
    def test_total_is_price_times_quantity(self, qty):
        cart = Cart()
        cart.add_item(MOUSE, qty)
        assert cart.total() == MOUSE.price * qty

    def test_same_product_merges_into_one_line(self):
        cart = Cart()
        cart.add_item(MOUSE, 2)
        line = cart.add_item(MOUSE, 3)
        assert cart.line_count == 1
        assert line.quantity == Quantity(5)
        assert cart.total() == Money.of("4000")

    def test_merge_order_does_not_change_total(self):
        a, b = Cart(), Cart()
        a.add_item(MOUSE, 1)
        a.add_item(LAPTOP, 1)
        a.add_item(MOUSE, 4)
        b.add_item(LAPTOP, 1)
        b.add_item(MOUSE, 5)
        assert a.total() == b.total()

    def test_merged_line_keeps_its_position(self):
        cart = Cart()
        cart.add_item(MOUSE, 1)
        cart.add_item(LAPTOP, 1)
        cart.add_item(MOUSE, 1)
        assert [line.product.id for line in cart.snapshot_lines()] == ["MOU", "LAP"]

    def test_item_count_sums_quantities(self):
        cart = Cart()
        cart.add_item(MOUSE, 2)
        cart.add_item(LAPTOP, 1)
        assert cart.item_count == 3

    def test_cent_prices_sum_exactly(self):
        cart = Cart()
        cart.add_item(CABLE, 3)
        assert str(cart.total()) == "₱59.97"


class TestAddItemValidation:

    @pytest.mark.parametrize("qty", [0, -1, -100])
    def test_non_positive_quantity_rejected_and_cart_unchanged(self, qty):
        cart = Cart()
        cart.add_item(LAPTOP, 1)
        before = (cart.line_count, cart.total())

        with pytest.raises(ValidationError, match="must be positive"):
            cart.add_item(MOUSE, qty)
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add_item(LAPTOP, qty)

        assert (cart.line_count, cart.total()) == before

    def test_capacity_limits_distinct_products(self):
        cart = Cart(capacity=1)
        cart.add_item(LAPTOP, 1)
        with pytest.raises(CapacityExceededError, match="Cart is full"):
            cart.add_item(MOUSE, 1)
        assert cart.line_count == 1

    def test_full_cart_still_merges_existing_product(self):
        cart = Cart(capacity=1)
        cart.add_item(LAPTOP, 1)
        cart.add_item(LAPTOP, 2)
        assert cart.item_count == 3

    def test_merge_overflow_rejected_and_line_unchanged(self):
        cart = Cart(max_quantity=10)
        cart.add_item(MOUSE, 8)
        with pytest.raises(QuantityOverflowError, match="would exceed 10"):
            cart.add_item(MOUSE, 3)
        assert cart.item_count == 8

    def test_merge_up_to_limit_allowed(self):
        cart = Cart(max_quantity=10)
        cart.add_item(MOUSE, 8)
        cart.add_item(MOUSE, 2)
        assert cart.item_count == 10

    def test_default_limit_is_32_bit(self):
        cart = Cart()
        cart.add_item(MOUSE, 2**31 - 1)
        with pytest.raises(QuantityOverflowError):
            cart.add_item(MOUSE, 1)

    def test_overflow_is_a_capacity_error(self):
        assert issubclass(QuantityOverflowError, CapacityExceededError)


class TestSnapshotAndClear:

    def test_clear_empties_cart(self):
        cart = Cart()
        cart.add_item(MOUSE, 2)
        cart.clear()
        assert cart.is_empty()
        assert cart.total() == Money.zero()

    def test_snapshot_survives_clear(self):
        cart = Cart()
        cart.add_item(MOUSE, 2)
        snapshot = cart.snapshot_lines()
        cart.clear()
        assert len(snapshot) == 1
        assert snapshot[0].quantity == Quantity(2)

    def test_snapshot_not_affected_by_later_merge(self):
        cart = Cart()
        cart.add_item(MOUSE, 2)
        snapshot = cart.snapshot_lines()
        cart.add_item(MOUSE, 5)
        assert snapshot[0].quantity == Quantity(2)
