"""Tests for cart item management on the Cart aggregate."""

import pytest
from ordering.cart.cart import Cart
from ordering.cart.events import (
    CartCheckedOut,
    CartItemAdded,
    CartItemMovedToCart,
    CartItemRemoved,
    CartItemSavedForLater,
    CartQuantityUpdated,
)
from protean.exceptions import ValidationError


def _make_cart():
    return Cart.create(customer_id="cust-001")


def _events(cart, event_cls):
    return [e for e in cart._events if isinstance(e, event_cls)]


class TestCreate:
    def test_new_cart_is_empty(self):
        cart = _make_cart()
        assert cart.items == []
        assert cart.total == 0.0
        assert cart.created_at is not None


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.items[0].is_saved_for_later is False

    def test_add_item_defaults_to_one(self):
        cart = _make_cart()
        cart.add_item("prod-001")
        assert cart.items[0].quantity == 1

    def test_add_item_raises_event(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        added = _events(cart, CartItemAdded)
        assert len(added) == 1
        assert added[0].item_id == item_id
        assert added[0].product_id == "prod-001"

    def test_add_same_product_increases_quantity(self):
        cart = _make_cart()
        first = cart.add_item("prod-001", 1)
        second = cart.add_item("prod-001", 2)
        assert first == second
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_add_product_that_is_saved_for_later_creates_active_line(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        cart.save_for_later(item_id)
        cart.add_item("prod-001", 2)
        assert len(cart.items) == 2
        assert len(cart.active_items) == 1
        assert len(cart.saved_items) == 1


class TestUpdateQuantity:
    def test_update_quantity(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        cart.update_item_quantity(item_id, 5)
        assert cart.items[0].quantity == 5

    def test_update_quantity_raises_event(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        cart.update_item_quantity(item_id, 4)
        event = _events(cart, CartQuantityUpdated)[0]
        assert event.previous_quantity == 1
        assert event.new_quantity == 4

    def test_quantity_below_one_is_rejected(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        with pytest.raises(ValidationError):
            cart.update_item_quantity(item_id, 0)

    def test_unknown_item_is_rejected(self):
        cart = _make_cart()
        with pytest.raises(ValidationError) as exc:
            cart.update_item_quantity("missing", 2)
        assert exc.value.messages == {"item_id": ["Item not found in cart"]}


class TestRemoveItem:
    def test_remove_item(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        cart.remove_item(item_id)
        assert cart.items == []
        assert len(_events(cart, CartItemRemoved)) == 1

    def test_remove_unknown_item(self):
        with pytest.raises(ValidationError):
            _make_cart().remove_item("missing")


class TestSaveForLater:
    def test_save_for_later_moves_item_out_of_active_set(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        cart.save_for_later(item_id)
        assert cart.active_items == []
        assert len(cart.saved_items) == 1
        assert len(_events(cart, CartItemSavedForLater)) == 1

    def test_cannot_save_twice(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        cart.save_for_later(item_id)
        with pytest.raises(ValidationError):
            cart.save_for_later(item_id)

    def test_move_back_to_cart(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        cart.save_for_later(item_id)
        cart.move_to_cart(item_id)
        assert len(cart.active_items) == 1
        assert len(_events(cart, CartItemMovedToCart)) == 1

    def test_cannot_move_active_item_to_cart(self):
        cart = _make_cart()
        item_id = cart.add_item("prod-001", 1)
        with pytest.raises(ValidationError):
            cart.move_to_cart(item_id)


class TestCheckOut:
    def test_check_out_keeps_only_saved_items(self):
        cart = _make_cart()
        cart.add_item("apple", 2)
        bread = cart.add_item("bread", 1)
        cart.save_for_later(bread)
        cart.total = 100.0

        cart.check_out(order_id="ord-001", ordered_total=100.0)

        assert [str(i.id) for i in cart.items] == [bread]
        assert cart.total == 0.0

    def test_check_out_raises_event(self):
        cart = _make_cart()
        cart.add_item("apple", 2)
        cart.check_out(order_id="ord-001", ordered_total=100.0)
        event = _events(cart, CartCheckedOut)[0]
        assert event.order_id == "ord-001"
        assert event.ordered_item_count == 1
        assert event.saved_item_count == 0
        assert event.ordered_total == 100.0
