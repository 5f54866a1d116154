"""Domain events for the Customer aggregate."""

from protean.fields import Boolean, Identifier, String

from ordering.domain import ordering


@ordering.event(part_of="Customer")
class CustomerRegistered:
    __version__ = 1

    customer_id = Identifier(required=True)
    name = String(required=True)
    email = String(required=True)
    phone = String(required=True)


@ordering.event(part_of="Customer")
class AddressAdded:
    __version__ = 1

    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)
    city = String(required=True)
    pincode = String(required=True)
    is_default = Boolean(default=False)


@ordering.event(part_of="Customer")
class AddressRemoved:
    __version__ = 1

    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)


@ordering.event(part_of="Customer")
class DefaultAddressChanged:
    __version__ = 1

    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)
    previous_default_address_id = Identifier()
