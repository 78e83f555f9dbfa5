"""Monitoring and metrics instrumentation for the Chaindoc SDK.

Exports Prometheus metrics for request outcomes, latency and retries.
"""

from chaindoc.monitoring.metrics import (
    request_latency_seconds,
    requests_total,
    retries_total,
)

__all__ = [
    "requests_total",
    "request_latency_seconds",
    "retries_total",
]
