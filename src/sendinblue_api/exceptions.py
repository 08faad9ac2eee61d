"""Sendinblue API exceptions module."""


class SendinblueApiError(Exception):
    """Base exception for all Sendinblue API exceptions."""


class SendinblueInvalidBackendError(SendinblueApiError):
    """Exception raised when the backend is invalid."""


class ConfigurationError(SendinblueApiError):
    """Exception raised when credentials are missing or a list is not enabled."""


class ContactValidationError(SendinblueApiError):
    """Exception raised when a contact submission misses a required value."""


class TransportError(SendinblueApiError):
    """
    Exception raised when a call to the remote API fails.

    `message` is the normalized, human readable error. `body` holds the decoded
    JSON error body when the remote API sent one.
    """

    def __init__(self, message, status_code=None, body=None):
        """Keep the normalized message and the raw error details."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body or {}
