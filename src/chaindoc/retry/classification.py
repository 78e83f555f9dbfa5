"""
Retryability classification for HTTP statuses and transport failures.
"""

import asyncio
import errno
import socket
from typing import Iterator

import httpx

RETRYABLE_STATUS_FLOOR = 500
TOO_MANY_REQUESTS = 429

TRANSIENT_ERRNOS = frozenset({errno.ECONNRESET, errno.ECONNREFUSED, errno.ETIMEDOUT})

TRANSIENT_GAI_ERRORS = frozenset(
    code
    for code in (
        getattr(socket, "EAI_NONAME", None),
        getattr(socket, "EAI_AGAIN", None),
        getattr(socket, "EAI_NODATA", None),
    )
    if code is not None
)

# Lower-cased fragments of the messages produced by the OS resolver and socket
# layer (and their symbolic names) for the transient classes above.
TRANSIENT_MARKERS = (
    "econnreset",
    "econnrefused",
    "etimedout",
    "enotfound",
    "eai_again",
    "connection reset",
    "connection refused",
    "timed out",
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "getaddrinfo failed",
)


def is_retryable_status(status_code: int) -> bool:
    """5xx and 429 are retryable, everything else is terminal."""
    return status_code >= RETRYABLE_STATUS_FLOOR or status_code == TOO_MANY_REQUESTS


def is_timeout(exc: BaseException) -> bool:
    """True for per-attempt deadline expiry and httpx timeouts."""
    return isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError))


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def is_transient_transport_error(exc: BaseException) -> bool:
    """
    Check whether a transport failure belongs to a known transient class.

    Walks the exception chain so that socket errors wrapped by httpx and
    httpcore are recognized.

    Args:
        exc: Exception raised while performing the HTTP exchange

    Returns:
        True for connection reset/refused, timeouts and DNS failures
    """
    if is_timeout(exc):
        return True

    for error in _exception_chain(exc):
        if isinstance(error, (ConnectionResetError, ConnectionRefusedError, TimeoutError)):
            return True
        if isinstance(error, socket.gaierror) and error.errno in TRANSIENT_GAI_ERRORS:
            return True
        if isinstance(error, OSError) and error.errno in TRANSIENT_ERRNOS:
            return True
        message = str(error).lower()
        if any(marker in message for marker in TRANSIENT_MARKERS):
            return True

    return False
