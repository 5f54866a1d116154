"""Catalogue management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from ordering.catalogue.product import Product
from ordering.domain import ordering

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    discount_price = Float(min_value=0.0)


@ordering.command(part_of="Product")
class UpdateProductPricing:
    product_id = Identifier(required=True)
    price = Float(required=True, min_value=0.0)
    discount_price = Float(min_value=0.0)


@ordering.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            price=command.price,
            discount_price=command.discount_price,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product added", product_id=str(product.id), price=command.price)
        return str(product.id)

    @handle(UpdateProductPricing)
    def update_pricing(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_pricing(price=command.price, discount_price=command.discount_price)
        repo.add(product)
