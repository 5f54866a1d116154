"""Cart total computation.

The cart total is derived data: the sum of effective price times quantity
over items that are not saved for later. It is computed by an explicit
function so callers control when prices are read.
"""

from collections.abc import Callable, Iterable


def compute_total(items: Iterable, resolve_price: Callable[[str], float]) -> float:
    """Sum `resolve_price(product_id) * quantity` over active items.

    `resolve_price` is only called for active items. Any exception it raises
    (for example `ProductResolutionError`) propagates to the caller.
    """
    total = 0.0
    for item in items:
        if item.is_saved_for_later:
            continue
        total += resolve_price(item.product_id) * item.quantity
    return round(total, 2)
