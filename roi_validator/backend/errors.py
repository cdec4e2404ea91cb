# This file defines the exceptions raised by the backend clients.

from __future__ import annotations


class RemoteOperationError(RuntimeError):
    """Raised when the auth or data service rejects an operation."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BackendUnavailableError(RemoteOperationError):
    """Raised when the service cannot be reached or responds with server errors."""
