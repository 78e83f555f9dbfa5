"""
Per-attempt bookkeeping.

A RequestAttempt is created at the start of every try and discarded when
the try resolves. It carries the attempt position within the budget and
the deadline derived from the attempt timeout.
"""

import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RequestAttempt:
    """
    One try of a logical request.

    Attributes:
        index: 0-based attempt index
        total_attempts: Attempt budget of the logical call
        timeout_ms: Timeout applied to this attempt
        started_at: Monotonic clock reading when the attempt started
    """

    index: int
    total_attempts: int
    timeout_ms: int
    started_at: float = field(default_factory=time.monotonic)

    def __post_init__(self) -> None:
        """Validate attempt invariants."""
        if self.total_attempts < 1:
            raise ValueError("total_attempts must be >= 1")

        if not 0 <= self.index < self.total_attempts:
            raise ValueError(
                f"index {self.index} out of range for {self.total_attempts} attempts"
            )

        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")

    @property
    def number(self) -> int:
        """1-based attempt number, for logs."""
        return self.index + 1

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def deadline(self) -> float:
        """Monotonic time after which the attempt is aborted."""
        return self.started_at + self.timeout_seconds

    @property
    def is_last(self) -> bool:
        return self.index >= self.total_attempts - 1
