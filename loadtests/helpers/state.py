"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State tracks ids returned by the API so follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks one simulated shopper from registration to cancellation."""

    customer_id: str | None = None
    product_ids: list[str] = field(default_factory=list)
    saved_item_id: str | None = None
    order_id: str | None = None
    order_count: int = 0

    @property
    def headers(self) -> dict:
        return {"X-Customer-ID": self.customer_id or ""}
