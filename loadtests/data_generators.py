"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
(PhoneNumber VO, Product pricing invariant, address limits) and match the
camelCase field names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker("en_IN")


def valid_email() -> str:
    """Generate unique emails; customers are unique by email."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def valid_phone() -> str:
    """Generate phones matching PhoneNumber VO regex: ^\\+?[\\d\\s\\-()]+$"""
    return f"+91 {random.randint(70000, 99999)} {random.randint(10000, 99999)}"


def customer_data() -> dict:
    """Generate RegisterCustomerRequest payload."""
    return {"name": fake.name()[:100], "email": valid_email(), "phone": valid_phone()}


def product_data() -> dict:
    """Generate AddProductRequest payload; discount never exceeds the list price."""
    price = round(random.uniform(20.0, 2000.0), 2)
    payload = {"name": f"{fake.word().capitalize()} {fake.word()}"[:255], "price": price}
    if random.random() < 0.5:
        payload["discountPrice"] = round(price * random.uniform(0.5, 0.95), 2)
    return payload


def address_data() -> dict:
    """Generate AddAddressRequest payload."""
    return {
        "name": fake.name()[:100],
        "addressLine1": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state()[:100],
        "pincode": fake.postcode()[:20],
        "phone": valid_phone(),
    }


def shipping_address() -> str:
    """Generate the free-text shipping address sent at checkout."""
    return fake.address().replace("\n", ", ")[:500]


def cart_item_data(product_id: str) -> dict:
    """Generate AddToCartRequest payload."""
    return {"productId": product_id, "quantity": random.randint(1, 4)}
