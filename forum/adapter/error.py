"""Adapter layer errors."""

from typing import Optional


class AdapterError(Exception):
    """Base adapter error."""

    pass


class NetworkError(AdapterError):
    """The backend could not be reached."""

    pass


class InvalidResponseError(AdapterError):
    """The backend answered with a body that could not be understood."""

    pass


class BackendError(AdapterError):
    """The backend rejected a request with a non-2xx status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message or f"Backend returned status {status_code}")


class AuthorizationError(BackendError):
    """The backend refused the request for the current user (401/403)."""

    pass


class ItemNotFoundError(BackendError):
    """The backend has no such item or discussion (404)."""

    pass
