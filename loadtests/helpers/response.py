"""Response error extraction for load test observability.

Parses storefront API error responses into human-readable messages.
Every error body has the shape {"error": ...}:

- Client errors (400/404): {"error": {"field": ["msg", ...]}}
- Auth and server errors (401/500): {"error": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return the raw text truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            parts = []
            for field, messages in error.items():
                if isinstance(messages, list):
                    messages = "; ".join(str(m) for m in messages)
                parts.append(f"{field}: {messages}")
            return " | ".join(parts)
        return str(error)

    # Unknown shape
    return str(body)[:300]
