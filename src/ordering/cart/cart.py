"""Cart aggregate — one per customer, repriced from the catalogue on every write.

Items can be parked with "save for later": parked items stay in the cart
across checkouts but never count towards the total and are never ordered.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer

from ordering.cart.events import (
    CartCheckedOut,
    CartItemAdded,
    CartItemMovedToCart,
    CartItemRemoved,
    CartItemSavedForLater,
    CartQuantityUpdated,
)
from ordering.cart.pricing import compute_total
from ordering.domain import ordering


@ordering.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    is_saved_for_later = Boolean(default=False)
    added_at = DateTime()


@ordering.aggregate
class Cart:
    customer_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    total = Float(default=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, total=0.0, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Views over items
    # -------------------------------------------------------------------
    @property
    def active_items(self):
        return [item for item in self.items if not item.is_saved_for_later]

    @property
    def saved_items(self):
        return [item for item in self.items if item.is_saved_for_later]

    def _find_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})
        return item

    # -------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------
    def reprice(self, resolve_price):
        """Recompute `total` from current prices. Call right before persisting."""
        self.total = compute_total(self.items, resolve_price) if self.items else 0.0

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity=1):
        """Add a product, or grow the quantity of its active line if there is one."""
        existing = next((i for i in self.active_items if str(i.product_id) == str(product_id)), None)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            item = CartItem(product_id=product_id, quantity=quantity, added_at=now)
            self.add_items(item)
            item_id = str(item.id)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=item_id,
                product_id=str(product_id),
                quantity=quantity,
            )
        )
        return item_id

    def update_item_quantity(self, item_id, new_quantity):
        if new_quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        item = self._find_item(item_id)
        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, item_id):
        item = self._find_item(item_id)
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), item_id=str(item_id)))

    def save_for_later(self, item_id):
        item = self._find_item(item_id)
        if item.is_saved_for_later:
            raise ValidationError({"item_id": ["Item is already saved for later"]})

        item.is_saved_for_later = True
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemSavedForLater(cart_id=str(self.id), item_id=str(item_id)))

    def move_to_cart(self, item_id):
        item = self._find_item(item_id)
        if not item.is_saved_for_later:
            raise ValidationError({"item_id": ["Item is already in the cart"]})

        item.is_saved_for_later = False
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemMovedToCart(cart_id=str(self.id), item_id=str(item_id)))

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def check_out(self, order_id, ordered_total):
        """Drop the ordered (active) items, keep saved-for-later ones, reset the total."""
        ordered = self.active_items
        for item in ordered:
            self.remove_items(item)

        self.total = 0.0
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                order_id=str(order_id),
                ordered_item_count=len(ordered),
                saved_item_count=len(self.saved_items),
                ordered_total=ordered_total,
            )
        )
