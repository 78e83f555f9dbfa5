"""
Retry machinery for the resilient request core.

Main Components:
    - RetryPolicy: Immutable attempt budget and jittered exponential backoff
    - RequestAttempt: One try, with its timeout-derived deadline
    - is_retryable_status / is_transient_transport_error: Outcome classification

Usage:
    >>> from chaindoc.retry import RetryPolicy
    >>> policy = RetryPolicy(max_retries=2, base_delay_ms=1000, max_delay_ms=10000)
    >>> policy.total_attempts()
    3
"""

from chaindoc.retry.classification import (
    is_retryable_status,
    is_timeout,
    is_transient_transport_error,
)
from chaindoc.retry.metadata import RequestAttempt
from chaindoc.retry.policy import RetryPolicy

__all__ = [
    "RetryPolicy",
    "RequestAttempt",
    "is_retryable_status",
    "is_timeout",
    "is_transient_transport_error",
]
