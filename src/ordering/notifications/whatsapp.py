"""WhatsApp click-to-chat links.

The storefront does not send messages itself; it hands the customer a
pre-filled link that opens a chat with the rendered message.
"""

import re
from urllib.parse import quote

DEFAULT_BASE_URL = "https://wa.me"

_NON_DIGITS = re.compile(r"\D")


def whatsapp_link(phone: str, text: str, base_url: str = DEFAULT_BASE_URL) -> str:
    digits = _NON_DIGITS.sub("", phone or "")
    return f"{base_url.rstrip('/')}/{digits}?text={quote(text, safe='')}"
