"""
LLM Client Utils - Error Responses.

Message extraction and classification for failed service responses.
"""

from .messages import UNKNOWN_ERROR, parse_retry_after, try_parse_error_message
from .classify import error_from_httpx_response, error_from_response

__all__ = [
    "UNKNOWN_ERROR",
    "parse_retry_after",
    "try_parse_error_message",
    "error_from_httpx_response",
    "error_from_response",
]
