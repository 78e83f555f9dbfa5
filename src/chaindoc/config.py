"""
Configuration for the Chaindoc SDK.

Settings can be passed explicitly or loaded from environment variables
prefixed with CHAINDOC_ (nested retry values use a double underscore,
e.g. CHAINDOC_RETRY__MAX_RETRIES=5). Use a .env file for local development.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


Environment = Literal["production", "staging", "development"]

ENVIRONMENT_URLS: dict[str, str] = {
    "production": "https://api.chaindoc.io",
    "staging": "https://api-demo.chaindoc.io",
    "development": "https://api-demo.chaindoc.io",
}

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY_MS = 1000
DEFAULT_MAX_DELAY_MS = 10000


class RetrySettings(BaseModel):
    """Retry overrides for failed requests (5xx, 429 and network failures)."""

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(DEFAULT_MAX_RETRIES, ge=0, description="Retries after the first attempt")
    base_delay_ms: int = Field(DEFAULT_BASE_DELAY_MS, ge=0, description="Initial backoff delay (ms)")
    max_delay_ms: int = Field(DEFAULT_MAX_DELAY_MS, ge=0, description="Backoff delay cap (ms)")


class ChaindocConfig(BaseSettings):
    """SDK settings, immutable once built."""

    model_config = SettingsConfigDict(
        env_prefix="CHAINDOC_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Credentials ===
    secret_key: str = ""  # Must start with sk_, checked by HttpClient

    # === Endpoint ===
    environment: Environment = "production"
    base_url: Optional[str] = None  # Overrides the environment URL when set

    # === Requests ===
    timeout: int = Field(DEFAULT_TIMEOUT_MS, gt=0, description="Per-attempt timeout (ms)")
    headers: dict[str, str] = Field(default_factory=dict)

    # === Retry ===
    retry: RetrySettings = Field(default_factory=RetrySettings)

    @property
    def resolved_base_url(self) -> str:
        """Base address with any trailing slash removed."""
        url = self.base_url or ENVIRONMENT_URLS[self.environment]
        return url.rstrip("/")
