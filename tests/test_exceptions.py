"""Tests for exceptions module - behavior focused."""

import pytest
from llm_client_utils.exceptions import (
    LLMClientError,
    RateLimitError,
    ServerError,
    AuthenticationError,
    ModelNotFoundError,
    InvalidRequestError,
    InternalError,
)


class TestRetryableFlag:
    """Test that exceptions have correct retryable defaults."""

    @pytest.mark.parametrize("exception_class", [RateLimitError, ServerError])
    def test_transient_errors_are_retryable(self, exception_class):
        """Rate limit and server errors should be retryable."""
        assert exception_class().retryable is True

    @pytest.mark.parametrize(
        "exception_class",
        [AuthenticationError, ModelNotFoundError, InvalidRequestError, InternalError],
    )
    def test_permanent_errors_not_retryable(self, exception_class):
        """Client-side and internal errors should not be retryable."""
        assert exception_class().retryable is False

    def test_base_error_not_retryable_by_default(self):
        """Base LLMClientError should not be retryable by default."""
        assert LLMClientError("test").retryable is False


class TestExceptionStringRepresentation:
    """Test that exception string includes useful context."""

    def test_str_includes_message(self):
        """String representation should include the message."""
        error = LLMClientError("Something went wrong")
        assert str(error) == "Something went wrong"

    def test_str_includes_all_context(self):
        """String should include provider, message, and status in order."""
        error = LLMClientError("Rate limited", provider="OpenAI", status_code=429)

        assert str(error) == "[OpenAI] Rate limited (status: 429)"

    def test_body_is_kept_out_of_str(self):
        """Raw body is stored but not rendered."""
        error = ServerError("boom", body='{"error": {"message": "boom"}}')

        assert error.body == '{"error": {"message": "boom"}}'
        assert "error" not in str(error)


class TestSubclassExtras:
    """Test subclass specific attributes."""

    def test_retry_after_is_stored(self):
        """retry_after value should be accessible."""
        assert RateLimitError(retry_after=30.0).retry_after == 30.0

    def test_retry_after_defaults_to_none(self):
        """retry_after should default to None."""
        assert RateLimitError().retry_after is None

    def test_model_name_is_stored(self):
        """Model name should be accessible."""
        assert ModelNotFoundError(model="gpt-5-turbo").model == "gpt-5-turbo"


class TestExceptionInheritance:
    """Test that all exceptions inherit from LLMClientError."""

    @pytest.mark.parametrize(
        "exception_class",
        [
            RateLimitError,
            ServerError,
            AuthenticationError,
            ModelNotFoundError,
            InvalidRequestError,
            InternalError,
        ],
    )
    def test_inherits_from_base(self, exception_class):
        """All exception types should be catchable as LLMClientError."""
        assert isinstance(exception_class(), LLMClientError)
