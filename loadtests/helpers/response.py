"""Response error extraction for load test observability.

Parses gateway error responses into human-readable messages.
Handles two response shapes:

- Gateway messages (400/401/404/409/500): plain-text single line
- FastAPI errors (403/404 on configuration routes): {"detail": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    Gracefully handles unparseable bodies and missing fields.
    """
    content_type = response.headers.get("content-type", "")
    if content_type.startswith("text/plain"):
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    try:
        body = response.json()
    except Exception:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])[:300]

    return str(body)[:300]
