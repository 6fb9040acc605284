"""
Backoff calculation.
"""

import random

from .config import MAX_DELAY_MS, BackoffConfig

_DEFAULT_CONFIG = BackoffConfig()


def backoff(attempt: int, config: BackoffConfig | None = None) -> float:
    """
    Calculate the delay before a retry.

    Attempts 0 and 1 share the initial delay; each later attempt multiplies
    it by the growth factor. No cap is applied, so callers bound their retry
    counts. A delay too large for a float saturates at MAX_DELAY_MS.

    Args:
        attempt: One-based retry number (0 is treated like 1)
        config: Backoff configuration (default: BackoffConfig())

    Returns:
        Delay in seconds with jitter applied, in whole milliseconds
    """
    if config is None:
        config = _DEFAULT_CONFIG

    exponent = max(attempt - 1, 0)
    try:
        base_ms = config.initial_delay_ms * config.factor**exponent
    except OverflowError:
        base_ms = MAX_DELAY_MS
    base_ms = int(min(base_ms, MAX_DELAY_MS))

    jitter = config.jitter_min + (config.jitter_max - config.jitter_min) * random.random()
    delay_ms = int(min(base_ms * jitter, MAX_DELAY_MS))

    return delay_ms / 1000
