"""Caller identity for the storefront API.

Authentication happens upstream; the gateway forwards the authenticated
customer's id in the `X-Customer-ID` header.
"""

from fastapi import Header, HTTPException

from ordering.utils.logging import add_context


async def authenticated_customer_id(x_customer_id: str | None = Header(default=None)) -> str:
    if not x_customer_id or not x_customer_id.strip():
        raise HTTPException(status_code=401, detail="Authentication required")
    customer_id = x_customer_id.strip()
    add_context(customer_id=customer_id)
    return customer_id
