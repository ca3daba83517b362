"""Unit tests for the Order aggregate."""

import dataclasses

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.cart import Cart
from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money

WIDGET = Product(id="W1", name="Widget", price=Money.of("10.00"))
GADGET = Product(id="G1", name="Gadget", price=Money.of("5.50"))


def _cart(*products: Product) -> Cart:
    cart = Cart()
    for p in products:
        cart.add_or_increment(p)
    return cart


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create("ORD-000001", _cart(WIDGET, GADGET).lines(), "Cash")
        assert order.id == "ORD-000001"
        assert order.payment_method == "Cash"
        assert order.total == Money.of("15.50")
        assert [line.product_id for line in order.lines] == ["W1", "G1"]
        assert order.created_at.tzinfo is not None

    def test_total_is_sum_of_line_totals(self):
        order = Order.create("ORD-1", _cart(WIDGET, WIDGET, GADGET).lines(), "GCash")
        assert order.total == Money.of("25.50")
        assert [line.quantity.value for line in order.lines] == [2, 1]

    def test_no_lines_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create("ORD-1", [], "Cash")

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError, match="Order ID"):
            Order.create("", _cart(WIDGET).lines(), "Cash")

    def test_missing_payment_method_rejected(self):
        with pytest.raises(ValidationError, match="Payment method"):
            Order.create("ORD-1", _cart(WIDGET).lines(), " ")


class TestOrderSnapshot:

    def test_later_cart_changes_do_not_reach_the_order(self):
        cart = _cart(WIDGET)
        order = Order.create("ORD-1", cart.lines(), "Cash")

        cart.add_or_increment(WIDGET, 5)
        cart.add_or_increment(GADGET)
        cart.clear()

        assert len(order.lines) == 1
        assert order.lines[0].quantity.value == 1
        assert order.total == Money.of("10.00")

    def test_order_is_immutable(self):
        order = Order.create("ORD-1", _cart(WIDGET).lines(), "Cash")
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.total = Money.zero()
        assert isinstance(order.lines, tuple)

    def test_line_snapshot_copies_price_and_name(self):
        order = Order.create("ORD-1", _cart(GADGET).lines(), "Cash")
        line = order.lines[0]
        assert line.product_name == "Gadget"
        assert line.unit_price == Money.of("5.50")
        assert line.line_total == Money.of("5.50")
