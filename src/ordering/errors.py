"""Error taxonomy for the ordering domain.

Rule violations reuse Protean's `ValidationError` (HTTP 400) so they carry the
same `{field: [messages]}` payload as field validation failures. Missing or
foreign-owned resources raise `NotFoundError` (HTTP 404). `UpstreamError`
signals that the backing store could not be reached (HTTP 500).
"""

from protean.exceptions import ValidationError


class ConflictError(ValidationError):
    """The request is well-formed but the current state does not allow it."""

    field = "non_field_errors"
    message = "Request conflicts with the current state"

    def __init__(self, message=None):
        super().__init__({self.field: [message or self.message]})


class EmptyCartError(ConflictError):
    field = "cart"
    message = "Your cart is empty"


class NoOrderableItemsError(ConflictError):
    field = "cart"
    message = "No items to order"


class OrderAlreadyCancelledError(ConflictError):
    field = "status"
    message = "This order is already cancelled"


class OrderNotCancellableError(ConflictError):
    field = "status"
    message = "Delivered orders cannot be cancelled"


class CancellationWindowExpiredError(ConflictError):
    field = "status"
    message = "Orders can only be cancelled within 30 minutes of placement"


class ProductResolutionError(ConflictError):
    field = "product_id"
    message = "Product could not be resolved"


class NotFoundError(Exception):
    """A resource is absent, or not owned by the caller."""

    field = "non_field_errors"
    message = "Not found"

    def __init__(self, message=None):
        self.messages = {self.field: [message or self.message]}
        super().__init__(message or self.message)


class OrderNotFoundError(NotFoundError):
    field = "order"
    message = "Order not found"


class CustomerNotFoundError(NotFoundError):
    field = "customer"
    message = "User not found"


class CartNotFoundError(NotFoundError):
    field = "cart"
    message = "Cart not found"


class UpstreamError(Exception):
    """The backing store or another dependency failed unexpectedly."""
