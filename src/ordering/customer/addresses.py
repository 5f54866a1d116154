"""Customer address book — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from ordering.customer.customer import Customer
from ordering.customer.directory import find_customer
from ordering.domain import ordering


@ordering.command(part_of="Customer")
class AddAddress:
    customer_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    address_line1 = String(required=True, max_length=255)
    address_line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    pincode = String(required=True, max_length=20)
    country = String(max_length=100)
    phone = String(required=True, max_length=20)
    is_default = Boolean(default=False)


@ordering.command(part_of="Customer")
class RemoveAddress:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)


@ordering.command(part_of="Customer")
class SetDefaultAddress:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)


@ordering.command_handler(part_of=Customer)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        customer = find_customer(command.customer_id)
        address = customer.add_address(
            name=command.name,
            address_line1=command.address_line1,
            address_line2=command.address_line2,
            city=command.city,
            state=command.state,
            pincode=command.pincode,
            country=command.country,
            phone=command.phone,
            is_default=bool(command.is_default),
        )
        current_domain.repository_for(Customer).add(customer)
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        customer = find_customer(command.customer_id)
        customer.remove_address(command.address_id)
        current_domain.repository_for(Customer).add(customer)

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        customer = find_customer(command.customer_id)
        customer.set_default_address(command.address_id)
        current_domain.repository_for(Customer).add(customer)
