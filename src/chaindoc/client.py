"""
Chaindoc SDK entry point.

Example:
    >>> async with Chaindoc(secret_key="sk_your_secret_key") as chaindoc:
    ...     uploaded = await chaindoc.media.upload([FileUpload.from_path("contract.pdf")])
    ...     doc = await chaindoc.documents.create({
    ...         "name": "Contract",
    ...         "description": "Service agreement",
    ...         "media": uploaded.media[0],
    ...         "hashtags": ["#contract"],
    ...         "status": "published",
    ...     })
"""

import random
from typing import Any, Optional

import httpx
import structlog
from pydantic import ValidationError as PydanticValidationError

from chaindoc.config import ChaindocConfig
from chaindoc.exceptions import ConfigurationError
from chaindoc.http.client import HttpClient, SleepFunc
from chaindoc.models.base import parse_response
from chaindoc.models.common import ApiKeyInfo, HealthCheckResponse
from chaindoc.resources import Documents, Embedded, Kyc, Media, Signatures


logger = structlog.get_logger(__name__)


class Chaindoc:
    """
    Client for the Chaindoc API.

    Construct once and reuse: the underlying HttpClient keeps a connection
    pool and no per-call state.

    Attributes:
        documents: Create, update and verify documents
        signatures: Create signature requests and sign documents
        embedded: Sessions for embedded document signing
        media: Upload files for use in documents
        kyc: Share and verify KYC data
    """

    def __init__(
        self,
        config: Optional[ChaindocConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        sleep: Optional[SleepFunc] = None,
        rng: Optional[random.Random] = None,
        **settings: Any,
    ):
        """
        Initialize the client.

        Args:
            config: Prebuilt configuration; when omitted, built from `settings`
                and CHAINDOC_* environment variables
            transport: Custom httpx transport
            http_client: Caller-owned httpx AsyncClient
            sleep: Coroutine used for backoff sleeps
            rng: Random source for backoff jitter
            **settings: ChaindocConfig fields (secret_key, environment, base_url,
                timeout, headers, retry)

        Raises:
            ConfigurationError: Invalid settings or secret key
        """
        if config is None:
            try:
                config = ChaindocConfig(**settings)
            except PydanticValidationError as e:
                raise ConfigurationError(
                    f"Invalid Chaindoc configuration: {e.error_count()} error(s)",
                    details={"errors": e.errors(include_url=False, include_input=False)},
                ) from e
        elif settings:
            raise ConfigurationError("Pass either a ChaindocConfig or keyword settings, not both")

        self.config = config
        self._client = HttpClient(
            config,
            transport=transport,
            http_client=http_client,
            sleep=sleep,
            rng=rng,
        )

        self.documents = Documents(self._client)
        self.signatures = Signatures(self._client)
        self.embedded = Embedded(self._client)
        self.media = Media(self._client)
        self.kyc = Kyc(self._client)

    @property
    def http(self) -> HttpClient:
        """The underlying request executor."""
        return self._client

    async def get_api_key_info(self) -> Optional[ApiKeyInfo]:
        """Information about the API key in use."""
        data = await self._client.get("/api/v1/me")
        return parse_response(data, ApiKeyInfo)

    async def health_check(self) -> Optional[HealthCheckResponse]:
        data = await self._client.get("/api/v1/health")
        return parse_response(data, HealthCheckResponse)

    async def close(self):
        await self._client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._client.base_url})"
