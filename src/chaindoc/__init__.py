"""
Chaindoc Server SDK.

Async Python client for the Chaindoc document-signing API:
- Documents (create, version, access rights, blockchain verification)
- Signature requests and signing
- Embedded signing sessions
- Media uploads
- KYC sharing

Every call goes through a resilient request core with per-attempt timeouts
and jittered exponential backoff on 5xx, 429 and transient network failures.
"""

from chaindoc.client import Chaindoc
from chaindoc.config import ChaindocConfig, RetrySettings
from chaindoc.exceptions import (
    ChaindocError,
    ConfigurationError,
    ErrorKind,
    HTTPStatusError,
    TransportError,
)
from chaindoc.http.multipart import FileUpload

__version__ = "0.1.0"

__all__ = [
    "Chaindoc",
    "ChaindocConfig",
    "RetrySettings",
    "ChaindocError",
    "ConfigurationError",
    "ErrorKind",
    "HTTPStatusError",
    "TransportError",
    "FileUpload",
]
