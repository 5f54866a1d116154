"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, String

from ordering.domain import ordering


@ordering.event(part_of="Product")
class ProductAdded:
    """A product was listed in the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    discount_price = Float()


@ordering.event(part_of="Product")
class ProductPricingUpdated:
    """A product's list or discount price changed."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_price = Float(required=True)
    previous_discount_price = Float()
    price = Float(required=True)
    discount_price = Float()
