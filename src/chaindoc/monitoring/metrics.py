"""Prometheus metrics for the Chaindoc SDK.

Metrics register on the default prometheus_client registry; expose them from
the host application (e.g. prometheus_client.start_http_server) to scrape.
Alert rules worth configuring:
- chaindoc_retries_total (sustained retries indicate API instability)
- chaindoc_requests_total{outcome!="success"} (terminal failures)
"""

from prometheus_client import Counter, Histogram

# === Request Metrics ===

requests_total = Counter(
    "chaindoc_requests_total",
    "Total logical API calls by method and outcome",
    ["method", "outcome"],
)
"""
Logical calls counter (one increment per call, not per attempt).

Labels:
- method: GET, POST, PUT, DELETE
- outcome: success, http_status, transport
"""

request_latency_seconds = Histogram(
    "chaindoc_request_latency_seconds",
    "Latency of logical API calls including retries and backoff",
    ["method", "outcome"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
)

# === Retry Metrics ===

retries_total = Counter(
    "chaindoc_retries_total",
    "Total retries by method and reason",
    ["method", "reason"],
)
"""
Retry counter, incremented before each backoff sleep.

Labels:
- method: GET, POST, PUT, DELETE
- reason: status_429, status_5xx, timeout, network
"""
