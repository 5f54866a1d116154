"""Customer aggregate — contact details and a small address book.

The ordering context only needs a customer's phone number (orders snapshot it
and notifications are addressed to it) and their saved delivery addresses.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, String, ValueObject

from ordering.customer.events import (
    AddressAdded,
    AddressRemoved,
    CustomerRegistered,
    DefaultAddressChanged,
)
from ordering.customer.phone import PhoneNumber
from ordering.domain import ordering

MAX_ADDRESSES = 3


@ordering.entity(part_of="Customer")
class Address:
    name: String(required=True, max_length=100)
    address_line1: String(required=True, max_length=255)
    address_line2: String(max_length=255)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    pincode: String(required=True, max_length=20)
    country: String(required=True, max_length=100, default="India")
    phone: String(required=True, max_length=20)
    is_default: Boolean(default=False)


@ordering.aggregate
class Customer:
    """A shopper, identified by the id the auth gateway puts on each request."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    phone: ValueObject(PhoneNumber, required=True)
    addresses: HasMany(Address)
    registered_at: DateTime()

    @invariant.post
    def addresses_cannot_exceed_maximum(self):
        if len(self.addresses) > MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Maximum of {MAX_ADDRESSES} addresses allowed"]})

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @classmethod
    def register(cls, name, email, phone):
        customer = cls(
            name=name,
            email=email,
            phone=PhoneNumber(number=phone),
            registered_at=datetime.now(UTC),
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer.id),
                name=name,
                email=email,
                phone=phone,
            )
        )
        return customer

    @property
    def default_address(self):
        return next((a for a in self.addresses if a.is_default), None)

    def add_address(
        self,
        name,
        address_line1,
        city,
        state,
        pincode,
        phone,
        address_line2=None,
        country="India",
        is_default=False,
    ):
        if len(self.addresses) >= MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Maximum of {MAX_ADDRESSES} addresses allowed"]})

        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    if addr.is_default:
                        addr.is_default = False

            address = Address(
                name=name,
                address_line1=address_line1,
                address_line2=address_line2,
                city=city,
                state=state,
                pincode=pincode,
                country=country or "India",
                phone=phone,
                is_default=is_default,
            )
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                customer_id=str(self.id),
                address_id=str(address.id),
                city=city,
                pincode=pincode,
                is_default=is_default,
            )
        )
        return address

    def remove_address(self, address_id):
        address = self._find_address(address_id)
        was_default = address.is_default

        with atomic_change(self):
            self.remove_addresses(address)

            # Removing the default promotes the first remaining address
            if was_default and self.addresses:
                self.addresses[0].is_default = True

        self.raise_(AddressRemoved(customer_id=str(self.id), address_id=str(address_id)))

    def set_default_address(self, address_id):
        address = self._find_address(address_id)
        previous = self.default_address

        with atomic_change(self):
            for addr in self.addresses:
                if addr.is_default:
                    addr.is_default = False
            address.is_default = True

        self.raise_(
            DefaultAddressChanged(
                customer_id=str(self.id),
                address_id=str(address_id),
                previous_default_address_id=str(previous.id) if previous else None,
            )
        )

    def _find_address(self, address_id):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ValidationError({"addresses": [f"Address {address_id} not found"]})
        return address
