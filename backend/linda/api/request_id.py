"""Request ID helper for endpoints and error handlers."""

from __future__ import annotations

from typing import Optional

from fastapi import Request

REQUEST_ID_ATTR = "request_id"


def get_request_id(request: Request, default: str = "unknown") -> str:
    """Return the request id bound by middleware, else a default."""
    rid: Optional[str] = getattr(request.state, REQUEST_ID_ATTR, None)
    return rid or request.headers.get("X-Request-Id") or default
