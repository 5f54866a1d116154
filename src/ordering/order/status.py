from enum import Enum


class OrderStatus(Enum):
    ORDERED = "ordered"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
