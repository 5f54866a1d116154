"""Order history — repository and read helpers.

Orders are listed per customer, newest first. There is no pagination; a
customer's history is small enough to read in one query.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.errors import OrderNotFoundError
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id) -> list[Order]:
        orders = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return sorted(orders, key=lambda order: order.order_date, reverse=True)


def orders_for_customer(customer_id) -> list[Order]:
    return current_domain.repository_for(Order).for_customer(customer_id)


def order_for_customer(order_id, customer_id) -> Order:
    """Load an order owned by `customer_id`.

    Orders belonging to someone else are reported exactly like missing ones.
    """
    try:
        order = current_domain.repository_for(Order).get(str(order_id))
    except ObjectNotFoundError as exc:
        raise OrderNotFoundError() from exc

    if str(order.customer_id) != str(customer_id):
        raise OrderNotFoundError()
    return order
