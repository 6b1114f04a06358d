"""
Exception hierarchy raised by the PayStation client.

Every error carries a human readable message, the provider (or HTTP) status
code when one is known, and the underlying exception that caused it.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "NetworkError",
    "PayStationError",
    "ValidationError",
]


class PayStationError(Exception):
    """Base class for every error raised by the client."""

    def __init__(
        self,
        message: str,
        status_code: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.original_error = original_error

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )


class ValidationError(PayStationError):
    """Raised for malformed call parameters or malformed provider responses."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ConfigurationError(ValidationError):
    """Raised when merchant credentials or the environment are invalid."""


class AuthenticationError(PayStationError):
    """Raised when PayStation rejects the merchant credentials (HTTP 401/403)."""

    def __init__(self, message: str, status_code: Optional[str] = None) -> None:
        super().__init__(message, status_code)


class NetworkError(PayStationError):
    """Raised when the HTTP exchange itself fails."""

    def __init__(
        self,
        message: str,
        original_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, None, original_error)
