"""
Helpers for describing HTTP failures in logs and error messages.
"""

from __future__ import annotations

import requests

_MAX_BODY_CHARS = 200


def format_request_exception(exc: requests.RequestException) -> str:
    """
    Summarize a requests exception without leaking the full response body.
    """
    response = getattr(exc, "response", None)
    if response is None:
        return f"{type(exc).__name__}: {exc}"
    body = (response.text or "").strip().replace("\n", " ")
    if len(body) > _MAX_BODY_CHARS:
        body = body[:_MAX_BODY_CHARS] + "..."
    reason = response.reason or ""
    summary = f"HTTP {response.status_code} {reason}".strip()
    if body:
        return f"{summary}: {body}"
    return summary
