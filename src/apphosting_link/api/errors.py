"""Typed errors decoded from Google API HTTP responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class ApiError(Exception):
    """Raised when a Google API call returns a non-success status."""

    def __init__(self, status_code: int, message: str, *, status: str | None = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}" if message else f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message
        self.status = status


class NotFoundError(ApiError):
    """The requested resource does not exist (HTTP 404)."""


class PermissionDeniedError(ApiError):
    """The caller lacks permission for the request (HTTP 403)."""


_ERRORS_BY_STATUS: dict[int, type[ApiError]] = {
    403: PermissionDeniedError,
    404: NotFoundError,
}


def error_from_response(response: httpx.Response) -> ApiError:
    """Build the typed error for a failed response.

    Google APIs return ``{"error": {"code", "message", "status"}}``; the raw
    body is used as the message when it is not in that shape.
    """
    message = response.text
    status: str | None = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        message = body["error"].get("message", message)
        status = body["error"].get("status")
    cls = _ERRORS_BY_STATUS.get(response.status_code, ApiError)
    return cls(response.status_code, message, status=status)


def raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise error_from_response(response)
