"""
Conversion of failed service responses into domain exceptions.

The caller owns the transport; these helpers only look at the status code,
body and headers of a response that has already arrived.
"""

import logging
import math

import httpx

from ..exceptions import (
    AuthenticationError,
    InvalidRequestError,
    LLMClientError,
    ModelNotFoundError,
    RateLimitError,
    ServerError,
)
from ..retry import BackoffConfig
from .messages import parse_retry_after, try_parse_error_message

logger = logging.getLogger(__name__)


def error_from_response(
    status_code: int,
    response_text: str = "",
    *,
    provider: str | None = None,
    retry_after: float | None = None,
    config: BackoffConfig | None = None,
) -> LLMClientError:
    """
    Convert an HTTP status code and body to a domain exception.

    Args:
        status_code: HTTP status of the failed response
        response_text: Raw response body
        provider: Provider name included in the exception's string form
        retry_after: Server-requested wait in seconds, if known
        config: Decides retryability of statuses without a dedicated class

    Returns:
        The exception to raise; it is returned, not raised
    """
    message = try_parse_error_message(response_text)
    context = {"provider": provider, "status_code": status_code, "body": response_text}

    if status_code in (401, 403):
        return AuthenticationError(message, **context)
    elif status_code == 404:
        return ModelNotFoundError(message, **context)
    elif status_code in (400, 413, 422):
        return InvalidRequestError(message, **context)
    elif status_code == 429:
        if retry_after is None:
            retry_after = parse_retry_after(message)
        return RateLimitError(message, retry_after=retry_after, **context)
    elif status_code >= 500:
        return ServerError(message, **context)

    config = config or BackoffConfig()
    return LLMClientError(message, retryable=config.should_retry(status_code), **context)


def _retry_after_header(response: httpx.Response) -> float | None:
    value = response.headers.get("retry-after")
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        # HTTP-date form
        logger.debug(f"Ignoring non-numeric Retry-After header: {value}")
        return None
    if not math.isfinite(seconds):
        logger.debug(f"Ignoring non-finite Retry-After header: {value}")
        return None
    return max(seconds, 0.0)


def error_from_httpx_response(
    response: httpx.Response,
    *,
    provider: str | None = None,
    config: BackoffConfig | None = None,
) -> LLMClientError:
    """Convert a failed httpx response to a domain exception."""
    return error_from_response(
        response.status_code,
        response.text,
        provider=provider,
        retry_after=_retry_after_header(response),
        config=config,
    )
