"""Pydantic request/response schemas for the storefront API.

These are external contracts, separate from the internal Protean commands.
JSON keys are camelCase on the wire; Python attributes stay snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class OrderItemSchema(CamelModel):
    product_id: str | None = None
    name: str
    quantity: int
    price: float


class OrderSchema(CamelModel):
    id: str
    customer_id: str
    items: list[OrderItemSchema]
    total: float
    address: str
    phone: str
    status: str
    order_date: datetime
    cancelled_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderSchema":
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            items=[
                OrderItemSchema(
                    product_id=str(item.product_id) if item.product_id else None,
                    name=item.name,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
            total=order.total,
            address=order.address,
            phone=order.phone,
            status=order.status,
            order_date=order.order_date,
            cancelled_at=order.cancelled_at,
        )


class CartItemSchema(CamelModel):
    id: str
    product_id: str
    quantity: int
    is_saved_for_later: bool
    added_at: datetime | None = None


class CartSchema(CamelModel):
    id: str | None = None
    customer_id: str
    items: list[CartItemSchema] = []
    total: float = 0.0

    @classmethod
    def from_cart(cls, cart) -> "CartSchema":
        return cls(
            id=str(cart.id),
            customer_id=str(cart.customer_id),
            items=[
                CartItemSchema(
                    id=str(item.id),
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    is_saved_for_later=bool(item.is_saved_for_later),
                    added_at=item.added_at,
                )
                for item in cart.items
            ],
            total=cart.total or 0.0,
        )


class AddressSchema(CamelModel):
    id: str
    name: str
    address_line1: str
    address_line2: str | None = None
    city: str
    state: str
    pincode: str
    country: str
    phone: str
    is_default: bool

    @classmethod
    def from_address(cls, address) -> "AddressSchema":
        return cls(
            id=str(address.id),
            name=address.name,
            address_line1=address.address_line1,
            address_line2=address.address_line2,
            city=address.city,
            state=address.state,
            pincode=address.pincode,
            country=address.country,
            phone=address.phone,
            is_default=bool(address.is_default),
        )


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(CamelModel):
    address: str | None = None

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"address": "12 Main St, Pune 411001"}]},
    )


class OrderNotificationResponse(CamelModel):
    order: OrderSchema
    notification_link: str


class CancellationStatusResponse(CamelModel):
    can_cancel: bool
    reason: str | None = None


class OrderListResponse(CamelModel):
    count: int
    orders: list[OrderSchema]


class OrderDetailResponse(CamelModel):
    order: OrderSchema
    can_cancel: bool
    remaining_minutes: int


# ---------------------------------------------------------------------------
# Cart Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class UpdateCartQuantityRequest(CamelModel):
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Catalogue Schemas
# ---------------------------------------------------------------------------
class AddProductRequest(CamelModel):
    name: str
    price: float = Field(ge=0)
    discount_price: float | None = Field(default=None, ge=0)


class UpdatePricingRequest(CamelModel):
    price: float = Field(ge=0)
    discount_price: float | None = Field(default=None, ge=0)


class ProductIdResponse(CamelModel):
    product_id: str


# ---------------------------------------------------------------------------
# Customer Schemas
# ---------------------------------------------------------------------------
class RegisterCustomerRequest(CamelModel):
    name: str
    email: str
    phone: str


class CustomerIdResponse(CamelModel):
    customer_id: str


class AddAddressRequest(CamelModel):
    name: str
    address_line1: str
    address_line2: str | None = None
    city: str
    state: str
    pincode: str
    country: str | None = None
    phone: str
    is_default: bool = False


class AddressIdResponse(CamelModel):
    address_id: str


class AddressListResponse(CamelModel):
    addresses: list[AddressSchema]


# ---------------------------------------------------------------------------
# Common
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"
