"""
LLM Client Utils - Exception Hierarchy.

Custom exceptions for service errors with retry-awareness.
"""

from .base import (
    LLMClientError,
    RateLimitError,
    ServerError,
    AuthenticationError,
    ModelNotFoundError,
    InvalidRequestError,
    InternalError,
)

__all__ = [
    "LLMClientError",
    "RateLimitError",
    "ServerError",
    "AuthenticationError",
    "ModelNotFoundError",
    "InvalidRequestError",
    "InternalError",
]
