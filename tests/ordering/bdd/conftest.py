"""Shared BDD fixtures and step definitions for the storefront."""

from urllib.parse import urlparse

import pytest
from ordering.cart.cart import Cart
from ordering.cart.items import AddToCart, SaveForLater
from ordering.catalogue.management import AddProduct, UpdateProductPricing
from ordering.checkout.checkout import PlaceOrder
from ordering.customer.registration import RegisterCustomer
from ordering.order.order import Order
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when


# ---------------------------------------------------------------------------
# Scenario state
# ---------------------------------------------------------------------------
@pytest.fixture()
def shop():
    """Mutable scenario state shared between steps."""
    return {"products": {}, "customer_id": None, "result": None, "error": None}


def _cart(shop):
    return current_domain.repository_for(Cart).for_customer(shop["customer_id"])


def _order(shop):
    return current_domain.repository_for(Order).get(shop["result"]["order_id"])


def _checkout(shop, address):
    try:
        shop["result"] = current_domain.process(
            PlaceOrder(customer_id=shop["customer_id"], address=address), asynchronous=False
        )
    except ValidationError as exc:
        shop["error"] = exc


def _messages(exc):
    return [message for messages in exc.messages.values() for message in messages]


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a registered customer with phone "{phone}"'))
def _(shop, phone):
    shop["customer_id"] = current_domain.process(
        RegisterCustomer(name="Asha Rao", email="asha@example.com", phone=phone),
        asynchronous=False,
    )


@given(parsers.cfparse('the catalogue lists "{name}" at {price:f} discounted to {discount:f}'))
def _(shop, name, price, discount):
    shop["products"][name] = current_domain.process(
        AddProduct(name=name, price=price, discount_price=discount), asynchronous=False
    )


@given(parsers.cfparse('the catalogue lists "{name}" at {price:f}'))
def _(shop, name, price):
    shop["products"][name] = current_domain.process(AddProduct(name=name, price=price), asynchronous=False)


@given(parsers.cfparse('the cart holds {quantity:d} "{name}"'))
def _(shop, quantity, name):
    current_domain.process(
        AddToCart(customer_id=shop["customer_id"], product_id=shop["products"][name], quantity=quantity),
        asynchronous=False,
    )


@given(parsers.cfparse('the cart holds {quantity:d} "{name}" saved for later'))
def _(shop, quantity, name):
    product_id = shop["products"][name]
    current_domain.process(
        AddToCart(customer_id=shop["customer_id"], product_id=product_id, quantity=quantity),
        asynchronous=False,
    )
    item = next(i for i in _cart(shop).active_items if str(i.product_id) == product_id)
    current_domain.process(
        SaveForLater(customer_id=shop["customer_id"], item_id=str(item.id)), asynchronous=False
    )


@given(parsers.cfparse('the customer has placed an order to "{address}"'))
def _(shop, address):
    _checkout(shop, address)
    assert shop["error"] is None


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer checks out to "{address}"'))
def _(shop, address):
    _checkout(shop, address)


@when("the customer checks out without an address")
def _(shop):
    _checkout(shop, "")


@when(parsers.cfparse('"{name}" is repriced to {price:f}'))
def _(shop, name, price):
    current_domain.process(
        UpdateProductPricing(product_id=shop["products"][name], price=price), asynchronous=False
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart total is {total:f}"))
def _(shop, total):
    assert _cart(shop).total == pytest.approx(total)


@then(parsers.cfparse('the cart holds only {quantity:d} "{name}" saved for later'))
def _(shop, quantity, name):
    cart = _cart(shop)
    assert [(str(i.product_id), i.quantity, i.is_saved_for_later) for i in cart.items] == [
        (shop["products"][name], quantity, True)
    ]


@then(parsers.cfparse('an order is placed with {quantity:d} "{name}" at {price:f}'))
def _(shop, quantity, name, price):
    assert shop["error"] is None
    order = _order(shop)
    assert [(i.name, i.quantity, i.price) for i in order.items] == [(name, quantity, price)]


@then(parsers.cfparse("the order total is {total:f}"))
def _(shop, total):
    assert _order(shop).total == pytest.approx(total)


@then(parsers.cfparse('the notification link opens a chat with "{digits}"'))
def _(shop, digits):
    link = urlparse(shop["result"]["notification_link"])
    assert link.path == f"/{digits}"
    assert link.query.startswith("text=")


@then(parsers.cfparse('checkout fails with "{message}"'))
def _(shop, message):
    assert shop["error"] is not None
    assert message in _messages(shop["error"])


@then("no order exists")
def _():
    assert current_domain.repository_for(Order)._dao.query.all().items == []


@then(parsers.cfparse('the order status is "{status}"'))
def _(shop, status):
    assert _order(shop).status == status
