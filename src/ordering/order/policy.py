"""Cancellation policy — when may an order still be cancelled?

A pure function of the order's status and the time elapsed since it was
placed. Cancelled and delivered orders are never cancellable; anything else
is cancellable while `now - order_date <= window` (the boundary itself is
inclusive).
"""

from datetime import UTC, datetime, timedelta
from typing import NamedTuple

from ordering.order.status import OrderStatus

DEFAULT_CANCELLATION_WINDOW = timedelta(minutes=30)

ALREADY_CANCELLED = "Order is already cancelled"
DELIVERED_NOT_CANCELLABLE = "Delivered orders cannot be cancelled"
WINDOW_EXPIRED = "Order cancellation window has expired"


class CancellationDecision(NamedTuple):
    can_cancel: bool
    reason: str | None = None


def _as_utc(moment: datetime) -> datetime:
    # Stores may hand back naive datetimes; they are always UTC here.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def elapsed_since_order(order, now: datetime) -> timedelta:
    return _as_utc(now) - _as_utc(order.order_date)


def check_cancellation(order, now: datetime, window: timedelta = DEFAULT_CANCELLATION_WINDOW) -> CancellationDecision:
    status = OrderStatus(order.status)
    if status == OrderStatus.CANCELLED:
        return CancellationDecision(False, ALREADY_CANCELLED)
    if status == OrderStatus.DELIVERED:
        return CancellationDecision(False, DELIVERED_NOT_CANCELLABLE)

    if elapsed_since_order(order, now) <= window:
        return CancellationDecision(True)
    return CancellationDecision(False, WINDOW_EXPIRED)


def remaining_minutes(order, now: datetime, window: timedelta = DEFAULT_CANCELLATION_WINDOW) -> int:
    """Whole minutes left in the window, 0 once it has closed or the order is not cancellable."""
    if not check_cancellation(order, now, window).can_cancel:
        return 0
    elapsed_minutes = int(elapsed_since_order(order, now).total_seconds() // 60)
    return max(0, int(window.total_seconds() // 60) - elapsed_minutes)
