"""Repository for the Cart aggregate."""

from ordering.cart.cart import Cart
from ordering.domain import ordering


@ordering.repository(part_of=Cart)
class CartRepository:
    def for_customer(self, customer_id) -> Cart | None:
        """Return the customer's cart, or None if they never added anything."""
        carts = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return carts[0] if carts else None
