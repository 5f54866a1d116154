"""Price resolution against the catalogue."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.catalogue.product import Product
from ordering.errors import ProductResolutionError, UpstreamError


class ProductCatalogue:
    """Looks products up by id, caching each one for the lifetime of the instance.

    One instance serves a single command, so repricing a cart reads every
    product at most once.
    """

    def __init__(self):
        self._products: dict[str, Product] = {}

    def product(self, product_id) -> Product:
        key = str(product_id)
        if key not in self._products:
            try:
                self._products[key] = current_domain.repository_for(Product).get(key)
            except ObjectNotFoundError as exc:
                raise ProductResolutionError(f"Product {key} is not available") from exc
            except Exception as exc:
                raise UpstreamError(f"Catalogue lookup failed for product {key}") from exc
        return self._products[key]

    def effective_price(self, product_id) -> float:
        return self.product(product_id).effective_price
