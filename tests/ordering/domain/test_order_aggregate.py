"""Tests for the Order aggregate — creation snapshot and lifecycle transitions."""

from datetime import UTC, datetime, timedelta

import pytest
from ordering.errors import (
    CancellationWindowExpiredError,
    OrderAlreadyCancelledError,
    OrderNotCancellableError,
)
from ordering.order.events import OrderCancelled, OrderDelivered, OrderPlaced
from ordering.order.order import Order, OrderStatus
from protean.exceptions import ValidationError

PLACED_AT = datetime(2026, 3, 14, 10, 0, tzinfo=UTC)


def _place(order_date=PLACED_AT, items=None):
    items = items or [{"product_id": "apple", "name": "Apple", "quantity": 2, "price": 50.0}]
    return Order.place(
        customer_id="cust-001",
        items_data=items,
        address="12 Main St",
        phone="+91 98765 43210",
        order_date=order_date,
    )


class TestPlace:
    def test_place_snapshots_items(self):
        order = _place()
        assert len(order.items) == 1
        item = order.items[0]
        assert (item.name, item.quantity, item.price) == ("Apple", 2, 50.0)

    def test_total_is_sum_of_line_totals(self):
        order = _place(
            items=[
                {"product_id": "apple", "name": "Apple", "quantity": 2, "price": 50.0},
                {"product_id": "milk", "name": "Milk", "quantity": 3, "price": 24.5},
            ]
        )
        assert order.total == 173.5

    def test_new_order_is_ordered(self):
        order = _place()
        assert order.status == OrderStatus.ORDERED.value
        assert order.order_date == PLACED_AT
        assert order.cancelled_at is None

    def test_order_date_defaults_to_now(self):
        before = datetime.now(UTC)
        order = Order.place(
            customer_id="cust-001",
            items_data=[{"product_id": "apple", "name": "Apple", "quantity": 1, "price": 50.0}],
            address="12 Main St",
            phone="9876543210",
        )
        assert order.order_date >= before

    def test_place_raises_event(self):
        order = _place()
        event = next(e for e in order._events if isinstance(e, OrderPlaced))
        assert event.order_id == str(order.id)
        assert event.item_count == 1
        assert event.total == 100.0

    def test_order_without_items_is_invalid(self):
        with pytest.raises(ValidationError):
            Order(
                customer_id="cust-001",
                items=[],
                total=0.0,
                address="12 Main St",
                phone="9876543210",
                order_date=PLACED_AT,
            )


class TestCancel:
    def test_cancel_inside_window(self):
        order = _place()
        now = PLACED_AT + timedelta(minutes=10)
        order.cancel(now=now)
        assert order.status == OrderStatus.CANCELLED.value
        assert order.cancelled_at == now

    def test_cancel_raises_event(self):
        order = _place()
        order.cancel(now=PLACED_AT + timedelta(minutes=1))
        event = next(e for e in order._events if isinstance(e, OrderCancelled))
        assert event.order_id == str(order.id)
        assert event.total == 100.0

    def test_cancel_twice(self):
        order = _place()
        order.cancel(now=PLACED_AT + timedelta(minutes=1))
        with pytest.raises(OrderAlreadyCancelledError):
            order.cancel(now=PLACED_AT + timedelta(minutes=2))

    def test_cancel_after_window(self):
        order = _place()
        with pytest.raises(CancellationWindowExpiredError) as exc:
            order.cancel(now=PLACED_AT + timedelta(minutes=30, seconds=1))
        assert exc.value.messages == {
            "status": ["Orders can only be cancelled within 30 minutes of placement"]
        }
        assert order.status == OrderStatus.ORDERED.value

    def test_cancel_with_custom_window(self):
        order = _place()
        with pytest.raises(CancellationWindowExpiredError):
            order.cancel(now=PLACED_AT + timedelta(minutes=6), window=timedelta(minutes=5))

    def test_cancel_delivered_order(self):
        order = _place()
        order.record_delivery()
        with pytest.raises(OrderNotCancellableError):
            order.cancel(now=PLACED_AT + timedelta(minutes=1))


class TestRecordDelivery:
    def test_record_delivery(self):
        order = _place()
        order.record_delivery()
        assert order.status == OrderStatus.DELIVERED.value
        assert any(isinstance(e, OrderDelivered) for e in order._events)

    def test_cancelled_order_cannot_be_delivered(self):
        order = _place()
        order.cancel(now=PLACED_AT + timedelta(minutes=1))
        with pytest.raises(ValidationError):
            order.record_delivery()
