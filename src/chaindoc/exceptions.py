"""
Exceptions raised by the Chaindoc SDK.

Every failure surfaced to callers is a ChaindocError. The `kind` attribute
discriminates the failure mode so callers can branch exhaustively without
isinstance chains, while the subclasses keep `except` clauses precise.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Failure mode of a ChaindocError."""

    CONFIGURATION = "configuration"
    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"


class ChaindocError(Exception):
    """
    Base exception for all SDK errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status of the failed response (None for transport
            and configuration failures)
        response: Decoded response body, if any
        is_retryable: Whether the failure was classified as transient
        kind: Discriminating failure mode
        details: Structured data for logging
    """

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Any = None,
        is_retryable: bool = False,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.is_retryable = is_retryable
        self.details = details or {}

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"is_retryable={self.is_retryable})"
        )


class ConfigurationError(ChaindocError):
    """
    Raised synchronously at construction time.

    Missing or malformed secret key, or invalid configuration values.
    Never retryable.
    """

    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, is_retryable=False, details=details)


class HTTPStatusError(ChaindocError):
    """
    Raised when the API answers with a non-2xx status.

    Retryable for 5xx and 429, terminal otherwise.
    """

    kind = ErrorKind.HTTP_STATUS


class TransportError(ChaindocError):
    """
    Raised when no HTTP response was obtained.

    Covers connection resets/refusals, DNS failures and per-attempt timeouts.
    Carries no status code.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        is_retryable: bool = False,
        details: dict | None = None,
    ):
        super().__init__(message, status_code=None, response=None, is_retryable=is_retryable, details=details)
