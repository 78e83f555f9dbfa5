"""
HTTP layer of the SDK.

Components:
- HttpClient: Resilient request executor (JSON and multipart variants)
- FileUpload: In-memory file for multipart uploads
- responses: Empty-body detection, JSON decoding, error construction
"""

from chaindoc.http.client import HttpClient
from chaindoc.http.multipart import FileUpload

__all__ = [
    "HttpClient",
    "FileUpload",
]
