"""
LLM Client Utils - Helpers for text-generation service clients.

Retry backoff, error-response parsing and citation cleanup.
"""

__version__ = "0.1.0"

from .diagnostics import error_or_raise, is_prerelease
from .exceptions import (
    LLMClientError,
    RateLimitError,
    ServerError,
    AuthenticationError,
    ModelNotFoundError,
    InvalidRequestError,
    InternalError,
)
from .responses import (
    error_from_httpx_response,
    error_from_response,
    parse_retry_after,
    try_parse_error_message,
)
from .retry import BackoffConfig, backoff
from .text import (
    CitationStripResult,
    has_citation_markup,
    strip_citation_markup,
    strip_citations,
)

__all__ = [
    # Version
    "__version__",
    # Diagnostics
    "error_or_raise",
    "is_prerelease",
    # Exceptions
    "LLMClientError",
    "RateLimitError",
    "ServerError",
    "AuthenticationError",
    "ModelNotFoundError",
    "InvalidRequestError",
    "InternalError",
    # Error responses
    "error_from_httpx_response",
    "error_from_response",
    "parse_retry_after",
    "try_parse_error_message",
    # Retry
    "BackoffConfig",
    "backoff",
    # Generated text
    "CitationStripResult",
    "has_citation_markup",
    "strip_citation_markup",
    "strip_citations",
]
