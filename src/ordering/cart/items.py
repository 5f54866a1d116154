"""Cart item management — commands and handler.

Every handler reprices the cart against the catalogue right before saving it,
inside the command's unit of work, so a stored cart never carries a stale
total.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart
from ordering.catalogue.prices import ProductCatalogue
from ordering.domain import ordering
from ordering.errors import CartNotFoundError


@ordering.command(part_of="Cart")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, default=1)


@ordering.command(part_of="Cart")
class UpdateCartQuantity:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@ordering.command(part_of="Cart")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


@ordering.command(part_of="Cart")
class SaveForLater:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


@ordering.command(part_of="Cart")
class MoveToCart:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


def _existing_cart(repo, customer_id) -> Cart:
    cart = repo.for_customer(customer_id)
    if cart is None:
        raise CartNotFoundError()
    return cart


def _save(repo, cart, catalogue=None):
    cart.reprice((catalogue or ProductCatalogue()).effective_price)
    repo.add(cart)
    return str(cart.id)


@ordering.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        catalogue = ProductCatalogue()
        catalogue.product(command.product_id)  # unknown products never enter a cart

        repo = current_domain.repository_for(Cart)
        cart = repo.for_customer(command.customer_id) or Cart.create(customer_id=command.customer_id)
        cart.add_item(product_id=command.product_id, quantity=command.quantity)
        return _save(repo, cart, catalogue)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.customer_id)
        cart.update_item_quantity(item_id=command.item_id, new_quantity=command.quantity)
        return _save(repo, cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.customer_id)
        cart.remove_item(item_id=command.item_id)
        return _save(repo, cart)

    @handle(SaveForLater)
    def save_for_later(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.customer_id)
        cart.save_for_later(item_id=command.item_id)
        return _save(repo, cart)

    @handle(MoveToCart)
    def move_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.customer_id)
        cart.move_to_cart(item_id=command.item_id)
        return _save(repo, cart)
