"""Web helpers."""

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> str | None:
    """Return the caller supplied X-Request-ID header, if any."""
    return request.headers.get(REQUEST_ID_HEADER)
