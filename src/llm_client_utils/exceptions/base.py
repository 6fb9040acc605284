"""
Base exception classes for service errors.

Each exception includes a `retryable` flag indicating whether the request
that produced it can be safely sent again with the same parameters.
"""


class LLMClientError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        status_code: int | None = None,
        provider: str | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.status_code = status_code
        self.provider = provider
        self.body = body

    def __str__(self) -> str:
        parts = [self.message]
        if self.provider:
            parts.insert(0, f"[{self.provider}]")
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        return " ".join(parts)


class RateLimitError(LLMClientError):
    """Raised when the service rejects a request with 429. Always retryable."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: float | None = None,
        **kwargs,
    ):
        super().__init__(message, retryable=True, **kwargs)
        self.retry_after = retry_after


class ServerError(LLMClientError):
    """Raised when the service returns a 5xx error. Usually retryable."""

    def __init__(self, message: str = "Server error", **kwargs):
        super().__init__(message, retryable=True, **kwargs)


class AuthenticationError(LLMClientError):
    """Raised when credentials are rejected. Not retryable."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class ModelNotFoundError(LLMClientError):
    """Raised when the requested model is not available. Not retryable."""

    def __init__(self, message: str = "Model not found", model: str | None = None, **kwargs):
        super().__init__(message, retryable=False, **kwargs)
        self.model = model


class InvalidRequestError(LLMClientError):
    """Raised when the request is malformed. Not retryable."""

    def __init__(self, message: str = "Invalid request", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class InternalError(LLMClientError):
    """
    Raised for programming defects, never for bad input.

    Seeing one of these means the package itself is broken (e.g. a pattern
    literal that does not compile) and retrying cannot help.
    """

    def __init__(self, message: str = "Internal error", **kwargs):
        super().__init__(message, retryable=False, **kwargs)
