"""Domain-level exceptions.

Services and adapters raise these errors to express failures.
Route handlers catch them and map to appropriate HTTP status codes;
the dashboard view turns them into notifications.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class AuthError(DomainError):
    """Missing or invalid credential."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class HttpError(DomainError):
    """Backend answered with a non-2xx status."""

    def __init__(self, status: int, message: str | None = None):
        self.status = status
        self.message = message
        super().__init__(message or f"Request failed with status {status}")


class FormatError(DomainError):
    """Malformed date or unexpected response shape."""


class PermissionDeniedError(DomainError):
    """Caller lacks permission for the requested action."""


class NetworkError(DomainError):
    """Backend could not be reached (timeout or connection failure)."""
