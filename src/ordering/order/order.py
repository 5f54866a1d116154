"""Order aggregate — the immutable record of a checkout (order history).

Line items are value copies of the cart taken at checkout: name, quantity and
the effective price at that moment. Later catalogue price changes never touch
an existing order, and the order total is frozen at creation.

State Machine:
    ORDERED → DELIVERED
    ORDERED → CANCELLED   (only inside the cancellation window)
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from ordering.errors import (
    CancellationWindowExpiredError,
    OrderAlreadyCancelledError,
    OrderNotCancellableError,
)
from ordering.order.events import OrderCancelled, OrderDelivered, OrderPlaced
from ordering.order.policy import DEFAULT_CANCELLATION_WINDOW, check_cancellation
from ordering.order.status import OrderStatus


@ordering.entity(part_of="Order")
class OrderItem:
    """Point-in-time copy of one cart line."""

    product_id = Identifier()
    name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)


@ordering.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    address = String(required=True, max_length=500)
    phone = String(required=True, max_length=20)
    status = String(choices=OrderStatus, default=OrderStatus.ORDERED.value)
    order_date = DateTime(required=True)
    cancelled_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["An order needs at least one item"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, items_data, address, phone, order_date=None):
        """Create an order from item snapshots.

        Args:
            customer_id: Owner of the order.
            items_data: List of dicts with product_id, name, quantity, price.
            address: Shipping address as entered at checkout.
            phone: Contact number copied from the customer.
            order_date: Defaults to now (UTC).
        """
        order_date = order_date or datetime.now(UTC)
        total = round(sum(item["price"] * item["quantity"] for item in items_data), 2)

        order = cls(
            customer_id=customer_id,
            items=[OrderItem(**item) for item in items_data],
            total=total,
            address=address,
            phone=phone,
            status=OrderStatus.ORDERED.value,
            order_date=order_date,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                item_count=len(items_data),
                total=total,
                address=address,
                order_date=order_date,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def cancel(self, now=None, window=DEFAULT_CANCELLATION_WINDOW):
        """Cancel the order if the cancellation policy allows it at `now`."""
        now = now or datetime.now(UTC)
        decision = check_cancellation(self, now, window)
        if not decision.can_cancel:
            current = OrderStatus(self.status)
            if current == OrderStatus.CANCELLED:
                raise OrderAlreadyCancelledError()
            if current == OrderStatus.DELIVERED:
                raise OrderNotCancellableError()
            minutes = int(window.total_seconds() // 60)
            raise CancellationWindowExpiredError(
                f"Orders can only be cancelled within {minutes} minutes of placement"
            )

        self.status = OrderStatus.CANCELLED.value
        self.cancelled_at = now

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                total=self.total,
                cancelled_at=now,
            )
        )

    def record_delivery(self):
        current = OrderStatus(self.status)
        if current != OrderStatus.ORDERED:
            raise ValidationError({"status": [f"Cannot mark a {current.value} order as delivered"]})

        now = datetime.now(UTC)
        self.status = OrderStatus.DELIVERED.value

        self.raise_(OrderDelivered(order_id=str(self.id), delivered_at=now))
