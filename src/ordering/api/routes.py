"""FastAPI routes for the storefront — orders, cart, catalogue and customers."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from ordering.api.auth import authenticated_customer_id
from ordering.api.schemas import (
    AddAddressRequest,
    AddProductRequest,
    AddressIdResponse,
    AddressListResponse,
    AddressSchema,
    AddToCartRequest,
    CancellationStatusResponse,
    CartSchema,
    CustomerIdResponse,
    OrderDetailResponse,
    OrderListResponse,
    OrderNotificationResponse,
    OrderSchema,
    PlaceOrderRequest,
    ProductIdResponse,
    RegisterCustomerRequest,
    StatusResponse,
    UpdateCartQuantityRequest,
    UpdatePricingRequest,
)
from ordering.cart.cart import Cart
from ordering.cart.items import (
    AddToCart,
    MoveToCart,
    RemoveFromCart,
    SaveForLater,
    UpdateCartQuantity,
)
from ordering.catalogue.management import AddProduct, UpdateProductPricing
from ordering.checkout.checkout import PlaceOrder
from ordering.config import get_settings
from ordering.customer.addresses import AddAddress, RemoveAddress, SetDefaultAddress
from ordering.customer.directory import find_customer
from ordering.customer.registration import RegisterCustomer
from ordering.order.cancellation import CancelOrder, cancellation_status
from ordering.order.history import order_for_customer, orders_for_customer
from ordering.order.order import Order
from ordering.order.policy import check_cancellation, remaining_minutes


def _order_with_link(result) -> OrderNotificationResponse:
    order = current_domain.repository_for(Order).get(result["order_id"])
    return OrderNotificationResponse(
        order=OrderSchema.from_order(order),
        notification_link=result["notification_link"],
    )


def _cart_view(customer_id) -> CartSchema:
    cart = current_domain.repository_for(Cart).for_customer(customer_id)
    if cart is None:
        return CartSchema(customer_id=customer_id)
    return CartSchema.from_cart(cart)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderNotificationResponse)
async def place_order(
    body: PlaceOrderRequest,
    customer_id: str = Depends(authenticated_customer_id),
) -> OrderNotificationResponse:
    command = PlaceOrder(customer_id=customer_id, address=body.address)
    result = current_domain.process(command, asynchronous=False)
    return _order_with_link(result)


@order_router.get("", response_model=OrderListResponse)
async def list_orders(customer_id: str = Depends(authenticated_customer_id)) -> OrderListResponse:
    orders = [OrderSchema.from_order(order) for order in orders_for_customer(customer_id)]
    return OrderListResponse(count=len(orders), orders=orders)


@order_router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(
    order_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> OrderDetailResponse:
    order = order_for_customer(order_id, customer_id)
    now = datetime.now(UTC)
    window = get_settings().cancellation_window
    return OrderDetailResponse(
        order=OrderSchema.from_order(order),
        can_cancel=check_cancellation(order, now, window).can_cancel,
        remaining_minutes=remaining_minutes(order, now, window),
    )


@order_router.get("/{order_id}/can-cancel", response_model=CancellationStatusResponse)
async def can_cancel_order(
    order_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> CancellationStatusResponse:
    decision = cancellation_status(order_id, customer_id)
    return CancellationStatusResponse(can_cancel=decision.can_cancel, reason=decision.reason)


@order_router.put("/{order_id}/cancel", response_model=OrderNotificationResponse)
async def cancel_order(
    order_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> OrderNotificationResponse:
    command = CancelOrder(order_id=order_id, customer_id=customer_id)
    result = current_domain.process(command, asynchronous=False)
    return _order_with_link(result)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartSchema)
async def get_cart(customer_id: str = Depends(authenticated_customer_id)) -> CartSchema:
    return _cart_view(customer_id)


@cart_router.post("/items", response_model=CartSchema)
async def add_cart_item(
    body: AddToCartRequest,
    customer_id: str = Depends(authenticated_customer_id),
) -> CartSchema:
    command = AddToCart(customer_id=customer_id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return _cart_view(customer_id)


@cart_router.put("/items/{item_id}", response_model=CartSchema)
async def update_cart_item(
    item_id: str,
    body: UpdateCartQuantityRequest,
    customer_id: str = Depends(authenticated_customer_id),
) -> CartSchema:
    command = UpdateCartQuantity(customer_id=customer_id, item_id=item_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return _cart_view(customer_id)


@cart_router.delete("/items/{item_id}", response_model=CartSchema)
async def remove_cart_item(
    item_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> CartSchema:
    current_domain.process(RemoveFromCart(customer_id=customer_id, item_id=item_id), asynchronous=False)
    return _cart_view(customer_id)


@cart_router.put("/items/{item_id}/save-for-later", response_model=CartSchema)
async def save_cart_item_for_later(
    item_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> CartSchema:
    current_domain.process(SaveForLater(customer_id=customer_id, item_id=item_id), asynchronous=False)
    return _cart_view(customer_id)


@cart_router.put("/items/{item_id}/move-to-cart", response_model=CartSchema)
async def move_cart_item_to_cart(
    item_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> CartSchema:
    current_domain.process(MoveToCart(customer_id=customer_id, item_id=item_id), asynchronous=False)
    return _cart_view(customer_id)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(name=body.name, price=body.price, discount_price=body.discount_price)
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}/pricing", response_model=StatusResponse)
async def update_product_pricing(product_id: str, body: UpdatePricingRequest) -> StatusResponse:
    command = UpdateProductPricing(
        product_id=product_id,
        price=body.price,
        discount_price=body.discount_price,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
customer_router = APIRouter(prefix="/customers", tags=["customers"])


@customer_router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(name=body.name, email=body.email, phone=body.phone)
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@customer_router.get("/me/addresses", response_model=AddressListResponse)
async def list_addresses(customer_id: str = Depends(authenticated_customer_id)) -> AddressListResponse:
    customer = find_customer(customer_id)
    return AddressListResponse(addresses=[AddressSchema.from_address(a) for a in customer.addresses])


@customer_router.post("/me/addresses", status_code=201, response_model=AddressIdResponse)
async def add_address(
    body: AddAddressRequest,
    customer_id: str = Depends(authenticated_customer_id),
) -> AddressIdResponse:
    command = AddAddress(
        customer_id=customer_id,
        name=body.name,
        address_line1=body.address_line1,
        address_line2=body.address_line2,
        city=body.city,
        state=body.state,
        pincode=body.pincode,
        country=body.country,
        phone=body.phone,
        is_default=body.is_default,
    )
    result = current_domain.process(command, asynchronous=False)
    return AddressIdResponse(address_id=result)


@customer_router.delete("/me/addresses/{address_id}", response_model=StatusResponse)
async def remove_address(
    address_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> StatusResponse:
    current_domain.process(RemoveAddress(customer_id=customer_id, address_id=address_id), asynchronous=False)
    return StatusResponse()


@customer_router.put("/me/addresses/{address_id}/default", response_model=StatusResponse)
async def set_default_address(
    address_id: str,
    customer_id: str = Depends(authenticated_customer_id),
) -> StatusResponse:
    current_domain.process(SetDefaultAddress(customer_id=customer_id, address_id=address_id), asynchronous=False)
    return StatusResponse()
