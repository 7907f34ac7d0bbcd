from typing import Any, Optional


class PortalError(Exception):
    """Base exception for the Attendance Portal client."""


class ValidationError(PortalError):
    """Raised when form input is rejected before any request is sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class AuthorizationError(PortalError):
    """Raised when the current user lacks a capability for an action."""


class ApiError(PortalError):
    """
    Raised when a gateway call is rejected.

    status_code is None for transport failures (connection refused, timeout).
    data holds the parsed response body, normally {"status": "error", "message": ...}.
    """

    def __init__(self, status_code: Optional[int], data: Optional[dict[str, Any]] = None):
        self.status_code = status_code
        self.data = data or {}
        super().__init__(self.message or f"Request failed (status: {status_code})")

    @property
    def message(self) -> Optional[str]:
        message = self.data.get("message")
        return message if isinstance(message, str) and message else None

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401
