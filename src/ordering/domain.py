"""Ordering bounded context — shopping carts, order history and cancellation.

Handles the per-customer cart (totals derived from live catalogue prices),
the checkout flow that snapshots a cart into an immutable order, and the
time-boxed cancellation policy for placed orders.
"""

from protean.domain import Domain

from ordering.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
ordering = Domain(name="ordering")
