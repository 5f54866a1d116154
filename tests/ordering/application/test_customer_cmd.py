"""Application tests for customer registration, address book and catalogue commands."""

import pytest
from ordering.catalogue.management import AddProduct, UpdateProductPricing
from ordering.catalogue.product import Product
from ordering.customer.addresses import AddAddress, RemoveAddress, SetDefaultAddress
from ordering.customer.customer import Customer
from ordering.errors import CustomerNotFoundError
from protean import current_domain
from protean.exceptions import ValidationError


def _add_address(customer_id, city="Pune", **overrides):
    values = {
        "customer_id": customer_id,
        "name": "Asha Rao",
        "address_line1": "12 Main St",
        "city": city,
        "state": "Maharashtra",
        "pincode": "411001",
        "phone": "9876543210",
    }
    values.update(overrides)
    return current_domain.process(AddAddress(**values), asynchronous=False)


class TestRegisterCustomer:
    def test_register_persists(self, customer_id):
        customer = current_domain.repository_for(Customer).get(customer_id)
        assert customer.name == "Asha Rao"
        assert customer.phone.number == "+91 98765-43210"


class TestAddressBook:
    def test_add_address(self, customer_id):
        address_id = _add_address(customer_id)
        customer = current_domain.repository_for(Customer).get(customer_id)
        assert str(customer.default_address.id) == address_id
        assert customer.default_address.country == "India"

    def test_fourth_address_is_rejected(self, customer_id):
        for city in ("Pune", "Mumbai", "Nagpur"):
            _add_address(customer_id, city=city)
        with pytest.raises(ValidationError):
            _add_address(customer_id, city="Nashik")
        assert len(current_domain.repository_for(Customer).get(customer_id).addresses) == 3

    def test_set_default(self, customer_id):
        _add_address(customer_id)
        second = _add_address(customer_id, city="Mumbai")
        current_domain.process(
            SetDefaultAddress(customer_id=customer_id, address_id=second), asynchronous=False
        )
        customer = current_domain.repository_for(Customer).get(customer_id)
        assert str(customer.default_address.id) == second

    def test_remove_default_promotes_remaining(self, customer_id):
        first = _add_address(customer_id)
        second = _add_address(customer_id, city="Mumbai")
        current_domain.process(RemoveAddress(customer_id=customer_id, address_id=first), asynchronous=False)
        customer = current_domain.repository_for(Customer).get(customer_id)
        assert [str(a.id) for a in customer.addresses] == [second]
        assert customer.addresses[0].is_default is True

    def test_unknown_customer(self):
        with pytest.raises(CustomerNotFoundError):
            _add_address("ghost")


class TestCatalogueCommands:
    def test_add_product(self, apple_id):
        product = current_domain.repository_for(Product).get(apple_id)
        assert product.effective_price == 50.0

    def test_update_pricing(self, bread_id):
        current_domain.process(
            UpdateProductPricing(product_id=bread_id, price=35.0, discount_price=28.0),
            asynchronous=False,
        )
        assert current_domain.repository_for(Product).get(bread_id).effective_price == 28.0

    def test_invalid_discount(self):
        with pytest.raises(ValidationError):
            current_domain.process(AddProduct(name="Apple", price=10.0, discount_price=20.0), asynchronous=False)
