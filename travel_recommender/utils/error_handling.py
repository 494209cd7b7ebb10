"""
Error handling for the Travel Recommender.

Custom exception classes shared by the gateway and the composer. The
gateway turns every server-side error into a normalized error response;
the composer turns every client-side error into a failed state.
"""


class RecommenderError(Exception):
    """Base exception class for all Travel Recommender errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """
        Initialize a RecommenderError.

        Args:
            message: Error message
            original_error: The original exception that caused this error (optional)
        """
        self.original_error = original_error
        if original_error:
            message = f"{message} - Original error: {original_error!s}"
        super().__init__(message)


class ValidationError(RecommenderError):
    """Error raised when validation of input or data fails."""

    pass


class AttachmentLimitError(ValidationError):
    """Error raised when an attachment batch would exceed the image limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"You can upload a maximum of {limit} images.")


class ConfigurationError(RecommenderError):
    """Error raised when the server is missing required configuration."""

    pass


class UpstreamError(RecommenderError):
    """Error raised when the Gemini API answers with a non-success status."""

    def __init__(
        self,
        status_code: int | None,
        body: str,
        original_error: Exception | None = None,
    ):
        """
        Initialize an UpstreamError.

        Args:
            status_code: HTTP status returned by the upstream API
            body: Response body kept as diagnostic text
            original_error: The original exception that caused this error (optional)
        """
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Gemini API failed with status: {status_code}. Body: {body}",
            original_error,
        )


class InvalidResponseError(RecommenderError):
    """Error raised when the Gemini reply does not have the expected shape."""

    pass


class GatewayError(RecommenderError):
    """Error raised by the composer when a gateway request fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        self.status_code = status_code
        # The message is shown to the user as-is
        super().__init__(message)
        self.original_error = original_error
