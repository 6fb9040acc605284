"""
Backoff configuration and default constants.
"""

from dataclasses import dataclass, field
from typing import Set

INITIAL_DELAY_MS = 200
BACKOFF_FACTOR = 2.0
JITTER_MIN = 0.9
JITTER_MAX = 1.1

# Delays saturate here instead of overflowing.
MAX_DELAY_MS = 2**64 - 1


@dataclass
class BackoffConfig:
    """
    Configuration for backoff delays.

    delay_ms = initial_delay_ms * factor ** (attempt - 1), scaled by a jitter
    factor drawn from [jitter_min, jitter_max).

    Attributes:
        initial_delay_ms: Delay before the first retry in milliseconds (default: 200)
        factor: Growth factor per attempt (default: 2.0)
        jitter_min: Lower bound of the jitter factor, inclusive (default: 0.9)
        jitter_max: Upper bound of the jitter factor, exclusive (default: 1.1)
        retryable_status_codes: HTTP status codes worth retrying
    """

    initial_delay_ms: int = INITIAL_DELAY_MS
    factor: float = BACKOFF_FACTOR
    jitter_min: float = JITTER_MIN
    jitter_max: float = JITTER_MAX
    retryable_status_codes: Set[int] = field(
        default_factory=lambda: {429, 500, 502, 503, 504}
    )

    def should_retry(self, status_code: int) -> bool:
        """Check if the given status code should trigger a retry."""
        return status_code in self.retryable_status_codes

    @classmethod
    def fast(cls) -> "BackoffConfig":
        """Preset for short delays, e.g. against a local server."""
        return cls(initial_delay_ms=50)

    @classmethod
    def slow(cls) -> "BackoffConfig":
        """Preset for long, steeply growing delays against a busy service."""
        return cls(initial_delay_ms=1000, factor=3.0)
