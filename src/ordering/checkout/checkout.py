"""Checkout — turns the active part of a cart into an Order.

All checks run before anything is written. The new order and the truncated
cart are then saved inside the unit of work that wraps this handler, so
either both are committed or neither is.
"""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart
from ordering.catalogue.prices import ProductCatalogue
from ordering.config import get_settings
from ordering.customer.directory import find_customer
from ordering.domain import ordering
from ordering.errors import EmptyCartError, NoOrderableItemsError
from ordering.notifications.templates import OrderPlacedMessage
from ordering.notifications.whatsapp import whatsapp_link
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    address = String(max_length=500)


@ordering.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        address = (command.address or "").strip()
        if not address:
            raise ValidationError({"address": ["Shipping address is required"]})

        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_customer(command.customer_id)
        if cart is None or not cart.items:
            raise EmptyCartError()

        customer = find_customer(command.customer_id)

        ordered_items = cart.active_items
        if not ordered_items:
            raise NoOrderableItemsError()

        catalogue = ProductCatalogue()
        snapshot = []
        for item in ordered_items:
            product = catalogue.product(item.product_id)
            snapshot.append(
                {
                    "product_id": str(item.product_id),
                    "name": product.name,
                    "quantity": item.quantity,
                    "price": product.effective_price,
                }
            )

        order = Order.place(
            customer_id=command.customer_id,
            items_data=snapshot,
            address=address,
            phone=customer.phone.number,
            order_date=datetime.now(UTC),
        )
        current_domain.repository_for(Order).add(order)

        cart.check_out(order_id=order.id, ordered_total=order.total)
        cart_repo.add(cart)

        settings = get_settings()
        message = OrderPlacedMessage.render(
            {
                "store_name": settings.store_name,
                "currency_prefix": settings.currency_prefix,
                "order_id": str(order.id),
                "items": snapshot,
                "total": order.total,
                "address": address,
                "phone": customer.phone.number,
            }
        )
        link = whatsapp_link(customer.phone.number, message["body"], base_url=settings.whatsapp_base_url)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            item_count=len(snapshot),
            saved_item_count=len(cart.saved_items),
            total=order.total,
        )
        return {"order_id": str(order.id), "notification_link": link}
