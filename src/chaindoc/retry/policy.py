"""
Retry policy and backoff computation.

Delays grow exponentially from `base_delay_ms`, are capped at `max_delay_ms`
and then perturbed by up to ±25% so that clients retrying against a
recovering backend spread out over time.
"""

import random
from dataclasses import dataclass

from chaindoc.config import (
    DEFAULT_BASE_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
    RetrySettings,
)

JITTER_RATIO = 0.25


@dataclass(frozen=True)
class RetryPolicy:
    """
    Immutable retry configuration held by the executor.

    Attributes:
        max_retries: Retries after the first attempt (total = max_retries + 1)
        base_delay_ms: Delay before the first retry, before jitter
        max_delay_ms: Upper bound of the un-jittered delay
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS
    max_delay_ms: int = DEFAULT_MAX_DELAY_MS

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.base_delay_ms < 0:
            raise ValueError("base_delay_ms must be >= 0")
        if self.max_delay_ms < 0:
            raise ValueError("max_delay_ms must be >= 0")

    @classmethod
    def from_settings(cls, settings: RetrySettings) -> "RetryPolicy":
        return cls(
            max_retries=settings.max_retries,
            base_delay_ms=settings.base_delay_ms,
            max_delay_ms=settings.max_delay_ms,
        )

    def total_attempts(self, no_retry: bool = False) -> int:
        """Attempt budget for one logical call."""
        if no_retry:
            return 1
        return self.max_retries + 1

    def capped_delay_ms(self, attempt: int) -> int:
        """Exponential delay for a 0-based attempt index, without jitter."""
        return min(self.base_delay_ms * (2 ** attempt), self.max_delay_ms)

    def compute_delay_ms(self, attempt: int, rng: random.Random | None = None) -> int:
        """
        Delay to sleep after a retryable failure of `attempt`.

        Args:
            attempt: 0-based index of the attempt that just failed
            rng: Random source for jitter (module-level random when None)

        Returns:
            Delay in whole milliseconds, never negative
        """
        capped = self.capped_delay_ms(attempt)
        uniform = (rng or random).random() * 2 - 1
        jitter = capped * JITTER_RATIO * uniform
        return max(0, round(capped + jitter))
