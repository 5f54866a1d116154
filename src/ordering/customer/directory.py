"""Customer lookup used by checkout and the address book."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.customer.customer import Customer
from ordering.errors import CustomerNotFoundError


def find_customer(customer_id) -> Customer:
    """Load a customer by id, raising `CustomerNotFoundError` when absent."""
    try:
        return current_domain.repository_for(Customer).get(str(customer_id))
    except ObjectNotFoundError as exc:
        raise CustomerNotFoundError() from exc
