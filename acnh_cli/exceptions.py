"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class AcnhCliError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(AcnhCliError):
    """Raised when client configuration values fail validation."""


class ValidationError(AcnhCliError):
    """
    Raised when a caller-supplied argument fails a precondition, such as an hour
    outside 0-23, an unknown weather or a missing download directory.
    """


class TransportError(AcnhCliError):
    """Raised when a request could not be dispatched or completed."""


class RemoteError(AcnhCliError):
    """Raised when the API answers with a non-200 status code."""

    def __init__(self, status: int, path: str = ""):
        self.status = status
        self.path = path
        message = f"received non-200 status code ({status})"
        if path:
            message += f" for {path}"
        super().__init__(message)


class NotFoundError(AcnhCliError):
    """Raised when a catalog was fetched but no record satisfies the filter."""
