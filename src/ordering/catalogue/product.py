"""Product aggregate — the slice of the catalogue the cart needs for pricing.

Carts hold product references only. Every time a cart is written, its total
is recomputed from the product's current effective price; orders copy the
effective price into their line items at checkout.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from ordering.catalogue.events import ProductAdded, ProductPricingUpdated
from ordering.domain import ordering


@ordering.aggregate
class Product:
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    discount_price = Float(min_value=0.0)

    @invariant.post
    def discount_cannot_exceed_price(self):
        if self.discount_price is not None and self.price is not None and self.discount_price > self.price:
            raise ValidationError({"discount_price": ["Discount price cannot exceed the list price"]})

    @property
    def effective_price(self) -> float:
        """Discount price when one is set, list price otherwise."""
        if self.discount_price is not None:
            return self.discount_price
        return self.price

    @classmethod
    def add(cls, name, price, discount_price=None):
        product = cls(name=name, price=price, discount_price=discount_price)
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                price=price,
                discount_price=discount_price,
            )
        )
        return product

    def update_pricing(self, price, discount_price=None):
        previous_price = self.price
        previous_discount_price = self.discount_price

        with atomic_change(self):
            self.price = price
            self.discount_price = discount_price

        self.raise_(
            ProductPricingUpdated(
                product_id=str(self.id),
                previous_price=previous_price,
                previous_discount_price=previous_discount_price,
                price=price,
                discount_price=discount_price,
            )
        )
