"""Message templates for order notifications.

Each template renders a subject and a plain-text body from a context dict.
The body is what ends up pre-filled in the WhatsApp chat.
"""

DEFAULT_CURRENCY_PREFIX = "Rs."


def format_amount(amount, currency_prefix=DEFAULT_CURRENCY_PREFIX) -> str:
    return f"{currency_prefix}{float(amount):.2f}"


def _item_lines(items, currency_prefix, with_prices=True) -> str:
    lines = []
    for item in items:
        if with_prices:
            line_total = item["price"] * item["quantity"]
            lines.append(
                f"- {item['name']} x {item['quantity']} = {format_amount(line_total, currency_prefix)}"
            )
        else:
            lines.append(f"- {item['name']} x {item['quantity']}")
    return "\n".join(lines)


class OrderPlacedMessage:
    @staticmethod
    def render(context: dict) -> dict:
        store_name = context.get("store_name", "Storefront")
        currency_prefix = context.get("currency_prefix", DEFAULT_CURRENCY_PREFIX)
        order_id = context.get("order_id", "N/A")
        items = context.get("items", [])
        return {
            "subject": f"Order #{order_id} placed",
            "body": (
                f"New order from {store_name}\n\n"
                f"Order ID: {order_id}\n"
                f"Items:\n{_item_lines(items, currency_prefix)}\n\n"
                f"Total: {format_amount(context.get('total', 0), currency_prefix)}\n"
                f"Shipping address: {context.get('address', '')}\n"
                f"Contact: {context.get('phone', '')}"
            ),
        }


class OrderCancelledMessage:
    @staticmethod
    def render(context: dict) -> dict:
        currency_prefix = context.get("currency_prefix", DEFAULT_CURRENCY_PREFIX)
        order_id = context.get("order_id", "N/A")
        cancelled_at = context.get("cancelled_at")
        cancelled_at_text = (
            cancelled_at.strftime("%d %b %Y, %H:%M UTC") if cancelled_at else "just now"
        )
        items = context.get("items", [])
        return {
            "subject": f"Order #{order_id} cancelled",
            "body": (
                f"Order #{order_id} has been cancelled.\n\n"
                f"Cancelled at: {cancelled_at_text}\n"
                f"Items:\n{_item_lines(items, currency_prefix, with_prices=False)}\n\n"
                f"Order total: {format_amount(context.get('total', 0), currency_prefix)}"
            ),
        }
