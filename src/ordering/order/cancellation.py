"""Order cancellation — eligibility query, command and handler.

The handler re-checks eligibility against the clock at the moment the
command is processed, so a stale "can cancel" answer never lets a late
cancellation through.
"""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.config import get_settings
from ordering.domain import ordering
from ordering.notifications.templates import OrderCancelledMessage
from ordering.notifications.whatsapp import whatsapp_link
from ordering.order.history import order_for_customer
from ordering.order.order import Order
from ordering.order.policy import CancellationDecision, check_cancellation

logger = structlog.get_logger(__name__)


def cancellation_status(order_id, customer_id, now=None) -> CancellationDecision:
    """Answer "can this customer cancel this order right now?" without changing anything."""
    order = order_for_customer(order_id, customer_id)
    return check_cancellation(order, now or datetime.now(UTC), get_settings().cancellation_window)


@ordering.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        settings = get_settings()
        now = datetime.now(UTC)

        order = order_for_customer(command.order_id, command.customer_id)
        order.cancel(now=now, window=settings.cancellation_window)
        current_domain.repository_for(Order).add(order)

        message = OrderCancelledMessage.render(
            {
                "order_id": str(order.id),
                "cancelled_at": now,
                "items": [{"name": item.name, "quantity": item.quantity} for item in order.items],
                "total": order.total,
                "currency_prefix": settings.currency_prefix,
            }
        )
        link = whatsapp_link(order.phone, message["body"], base_url=settings.whatsapp_base_url)

        logger.info(
            "Order cancelled",
            order_id=str(order.id),
            customer_id=str(order.customer_id),
            total=order.total,
        )
        return {"order_id": str(order.id), "notification_link": link}
