"""Error types for the tone adjustment backend and its client package."""


class ToneAdjustmentError(Exception):
    """Base class for errors raised while handling a tone adjustment.

    Attributes:
        message: Human-readable error message, safe to return to callers
        status_code: HTTP status the error maps to
    """

    status_code = 500
    default_message = "Failed to adjust text tone. Please try again."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ToneAdjustmentError):
    """Text or tone coordinates failed validation. Client-correctable."""

    status_code = 400
    default_message = "Invalid request. Please check your input."


class UpstreamAuthError(ToneAdjustmentError):
    """The model API rejected our credentials, or none are configured."""

    status_code = 401
    default_message = "Invalid API key. Please check your model API configuration."


class UpstreamRateLimited(ToneAdjustmentError):
    """The model API is rate limiting us. Not retried; the caller must retry."""

    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class UpstreamUnavailable(ToneAdjustmentError):
    """Any other model call failure: network, timeout or a malformed response."""

    status_code = 500


class ClientError(Exception):
    """Base class for errors raised by the client package."""


class ApiError(ClientError):
    """A backend call failed. The message is meant for the end user."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StorageFailure(ClientError):
    """Local persistence could not read or write (quota exceeded, I/O error)."""


class ImportFormatError(ClientError):
    """An import file is unreadable or not a JSON object."""
