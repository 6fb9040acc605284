"""
LLM Client Utils - Retry Backoff.

Exponential backoff with jitter for an external retry loop.
"""

from .config import (
    BACKOFF_FACTOR,
    INITIAL_DELAY_MS,
    MAX_DELAY_MS,
    BackoffConfig,
)
from .backoff import backoff

__all__ = [
    "BACKOFF_FACTOR",
    "INITIAL_DELAY_MS",
    "MAX_DELAY_MS",
    "BackoffConfig",
    "backoff",
]
