"""
Resilient HTTP client for the Chaindoc API.

Communicates with the API using an httpx AsyncClient. Every logical call is
executed as a bounded sequence of attempts:

- each attempt has its own deadline and is aborted when it expires
- 5xx, 429, timeouts and transient network failures are retried with
  jittered exponential backoff
- any other failure, or a failure on the last attempt, is raised at once

Attempts never overlap: a retry is only started after the previous attempt
has resolved, so write endpoints never see speculative duplicates.
"""

import asyncio
import random
import time
from typing import Any, Awaitable, Callable, Literal, Mapping, Optional, Sequence

import httpx
import structlog
from pydantic import BaseModel

from chaindoc.config import ChaindocConfig
from chaindoc.exceptions import ChaindocError, ConfigurationError, TransportError
from chaindoc.http.multipart import FileInput, encode_files, normalize_files
from chaindoc.http.responses import build_status_error, parse_success
from chaindoc.monitoring.metrics import request_latency_seconds, requests_total, retries_total
from chaindoc.retry.classification import is_timeout, is_transient_transport_error
from chaindoc.retry.metadata import RequestAttempt
from chaindoc.retry.policy import RetryPolicy


logger = structlog.get_logger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]
HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")
SECRET_KEY_PREFIX = "sk_"
UPLOAD_TIMEOUT_MULTIPLIER = 2

RequestBuilder = Callable[[httpx.AsyncClient, RequestAttempt], httpx.Request]
SleepFunc = Callable[[float], Awaitable[Any]]


def to_jsonable(body: Any) -> Any:
    """Dump pydantic models by alias; other values are passed through."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


class HttpClient:
    """
    Request executor shared by all API resources.

    Holds only immutable configuration and a pooled httpx.AsyncClient, so
    a single instance can serve concurrent calls without locking.

    Attributes:
        base_url: API base address without trailing slash
        timeout: Default per-attempt timeout in milliseconds
        retry_policy: Attempt budget and backoff parameters
    """

    def __init__(
        self,
        config: ChaindocConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        sleep: Optional[SleepFunc] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the executor.

        Args:
            config: SDK configuration
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
            http_client: Caller-owned AsyncClient; it is not closed by close()
            sleep: Coroutine used for backoff sleeps (default asyncio.sleep)
            rng: Random source for backoff jitter

        Raises:
            ConfigurationError: Secret key missing or not starting with "sk_"
        """
        if not config.secret_key:
            raise ConfigurationError("secret_key is required")

        if not config.secret_key.startswith(SECRET_KEY_PREFIX):
            raise ConfigurationError(f'secret_key must start with "{SECRET_KEY_PREFIX}"')

        self.base_url = config.resolved_base_url
        self.timeout = config.timeout
        self.retry_policy = RetryPolicy.from_settings(config.retry)
        self._secret_key = config.secret_key
        self._default_headers = httpx.Headers(
            {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.secret_key}",
            }
        )
        self._default_headers.update(config.headers)

        self._transport = transport
        self._client = http_client
        self._owns_client = http_client is None
        self._sleep: SleepFunc = sleep or asyncio.sleep
        self._rng = rng

        logger.info(
            "Chaindoc HTTP client initialized",
            base_url=self.base_url,
            timeout_ms=self.timeout,
            max_retries=self.retry_policy.max_retries,
            base_delay_ms=self.retry_policy.base_delay_ms,
            max_delay_ms=self.retry_policy.max_delay_ms,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout / 1000.0),
                follow_redirects=True,
                transport=self._transport,
            )
            self._owns_client = True
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    # === Public API ===

    async def request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        body: Any = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[int] = None,
        no_retry: bool = False,
    ) -> Any:
        """
        Execute a JSON request with retry.

        Args:
            endpoint: Path appended to the base URL (e.g. "/api/v1/me")
            method: HTTP method
            body: JSON-serializable value or pydantic model; omitted when None
            headers: Extra headers, overriding the defaults on conflict
            timeout: Per-attempt timeout override in milliseconds
            no_retry: Make exactly one attempt

        Returns:
            Decoded JSON payload, or None for empty / non-JSON / undecodable bodies

        Raises:
            HTTPStatusError: Non-2xx response (after retries when retryable)
            TransportError: Network failure or timeout (after retries when retryable)
            ConfigurationError: Timeout override is not a positive number of milliseconds
        """
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if timeout is not None and timeout <= 0:
            raise ConfigurationError(
                "timeout must be a positive number of milliseconds",
                details={"timeout": timeout},
            )

        url = self._url(endpoint)
        payload = to_jsonable(body)
        merged_headers = httpx.Headers(self._default_headers)
        if headers:
            merged_headers.update(headers)

        def build(client: httpx.AsyncClient, attempt: RequestAttempt) -> httpx.Request:
            return client.build_request(
                method,
                url,
                headers=merged_headers,
                json=payload,
                timeout=attempt.timeout_seconds,
            )

        return await self._execute(
            method=method,
            url=url,
            build_request=build,
            total_attempts=self.retry_policy.total_attempts(no_retry),
            timeout_ms=timeout if timeout is not None else self.timeout,
            operation="request",
        )

    async def get(self, endpoint: str, **options: Any) -> Any:
        return await self.request(endpoint, "GET", **options)

    async def post(self, endpoint: str, body: Any = None, **options: Any) -> Any:
        return await self.request(endpoint, "POST", body, **options)

    async def put(self, endpoint: str, body: Any = None, **options: Any) -> Any:
        return await self.request(endpoint, "PUT", body, **options)

    async def delete(self, endpoint: str, **options: Any) -> Any:
        return await self.request(endpoint, "DELETE", **options)

    async def upload_files(
        self,
        endpoint: str,
        files: Sequence[FileInput],
        field_name: str = "media",
    ) -> Any:
        """
        Upload files as multipart/form-data with retry.

        The form is re-encoded on every attempt. Only the Authorization header
        is sent; httpx sets the multipart Content-Type with its boundary.
        Uploads always use the full retry budget and twice the default timeout.

        Args:
            endpoint: Upload path
            files: FileUpload objects, bytes, (name, bytes[, content_type]) tuples or paths
            field_name: Form field carrying every file

        Returns:
            Decoded JSON payload, or None
        """
        uploads = normalize_files(files)
        url = self._url(endpoint)
        auth_headers = {"Authorization": f"Bearer {self._secret_key}"}

        def build(client: httpx.AsyncClient, attempt: RequestAttempt) -> httpx.Request:
            return client.build_request(
                "POST",
                url,
                headers=auth_headers,
                files=encode_files(field_name, uploads),
                timeout=attempt.timeout_seconds,
            )

        return await self._execute(
            method="POST",
            url=url,
            build_request=build,
            total_attempts=self.retry_policy.total_attempts(),
            timeout_ms=self.timeout * UPLOAD_TIMEOUT_MULTIPLIER,
            operation="upload",
        )

    # === Retry state machine ===

    async def _execute(
        self,
        method: str,
        url: str,
        build_request: RequestBuilder,
        total_attempts: int,
        timeout_ms: int,
        operation: str,
    ) -> Any:
        start_time = time.perf_counter()
        last_error: ChaindocError | None = None

        for index in range(total_attempts):
            attempt = RequestAttempt(index=index, total_attempts=total_attempts, timeout_ms=timeout_ms)

            try:
                payload = await self._send_attempt(attempt, build_request, operation)
            except ChaindocError as e:
                last_error = e

                if not e.is_retryable or attempt.is_last:
                    logger.error(
                        f"Chaindoc {operation} failed",
                        method=method,
                        url=url,
                        attempt=attempt.number,
                        total_attempts=total_attempts,
                        status_code=e.status_code,
                        retryable=e.is_retryable,
                        error=e.message,
                    )
                    self._record(method, e.kind.value, start_time)
                    raise

                delay_ms = self.retry_policy.compute_delay_ms(index, self._rng)
                logger.warning(
                    f"Chaindoc {operation} failed, retrying",
                    method=method,
                    url=url,
                    attempt=attempt.number,
                    total_attempts=total_attempts,
                    status_code=e.status_code,
                    error=e.message,
                    delay_ms=delay_ms,
                )
                retries_total.labels(method=method, reason=_retry_reason(e)).inc()
                await self._sleep(delay_ms / 1000.0)
                continue

            logger.debug(
                f"Chaindoc {operation} succeeded",
                method=method,
                url=url,
                attempt=attempt.number,
            )
            self._record(method, "success", start_time)
            return payload

        # Only reachable with an empty attempt budget
        raise last_error or TransportError(f"{operation} failed after retries")

    async def _send_attempt(
        self,
        attempt: RequestAttempt,
        build_request: RequestBuilder,
        operation: str,
    ) -> Any:
        """Run one attempt: send under the deadline, then classify the response."""
        client = await self._get_client()
        request = build_request(client, attempt)

        logger.debug(
            f"Sending Chaindoc {operation}",
            method=request.method,
            url=str(request.url),
            attempt=attempt.number,
            total_attempts=attempt.total_attempts,
            timeout_ms=attempt.timeout_ms,
        )

        try:
            response = await asyncio.wait_for(client.send(request), timeout=attempt.timeout_seconds)
        except (httpx.HTTPError, asyncio.TimeoutError, OSError) as e:
            raise _transport_error(e, operation, attempt) from e

        if not response.is_success:
            raise build_status_error(response, operation)

        return parse_success(response)

    def _record(self, method: str, outcome: str, start_time: float) -> None:
        requests_total.labels(method=method, outcome=outcome).inc()
        request_latency_seconds.labels(method=method, outcome=outcome).observe(
            time.perf_counter() - start_time
        )

    # === Lifecycle ===

    async def close(self):
        """Close the HTTP client connection (only when created by the SDK)."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Chaindoc HTTP client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}ms, "
            f"max_retries={self.retry_policy.max_retries})"
        )


def _transport_error(exc: BaseException, operation: str, attempt: RequestAttempt) -> TransportError:
    """Map a failed exchange to a TransportError."""
    if is_timeout(exc):
        return TransportError(
            f"{operation} timeout",
            is_retryable=True,
            details={"timeout": True, "timeout_ms": attempt.timeout_ms, "error_type": type(exc).__name__},
        )

    return TransportError(
        str(exc) or type(exc).__name__,
        is_retryable=is_transient_transport_error(exc),
        details={"timeout": False, "error_type": type(exc).__name__},
    )


def _retry_reason(error: ChaindocError) -> str:
    if error.status_code == 429:
        return "status_429"
    if error.status_code is not None:
        return "status_5xx"
    if error.details.get("timeout"):
        return "timeout"
    return "network"
