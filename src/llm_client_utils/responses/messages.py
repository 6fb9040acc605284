"""
Best-effort extraction of human-readable text from service error bodies.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"

_RETRY_AFTER_PATTERN = re.compile(r"(?i)try again in\s*(\d+(?:\.\d+)?)\s*(ms|s|seconds?)\b")


def try_parse_error_message(text: str) -> str:
    """
    Extract the error message from a service response body.

    Bodies shaped like {"error": {"message": "..."}} yield the message
    verbatim. Anything else (not JSON, JSON of another shape) is returned
    unchanged, and an empty body becomes "Unknown error". An empty
    error.message does not count as a message, so the body is returned
    instead and the result is never empty.

    Never raises.
    """
    logger.debug(f"Parsing server error response: {text}")
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError):
        data = None

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message

    if not text:
        return UNKNOWN_ERROR
    return text


def parse_retry_after(message: str | None) -> float | None:
    """
    Find a "try again in N" hint in an error message.

    Args:
        message: Error message, usually from try_parse_error_message

    Returns:
        The hinted wait in seconds, or None when the message has no hint
    """
    match = _RETRY_AFTER_PATTERN.search(message or "")
    if not match:
        return None
    value = float(match.group(1))
    if match.group(2).lower() == "ms":
        return value / 1000
    return value
