"""Order delivery — fulfilment hook that closes the cancellation path."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class RecordDelivery:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class RecordDeliveryHandler:
    @handle(RecordDelivery)
    def record_delivery(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.record_delivery()
        repo.add(order)
