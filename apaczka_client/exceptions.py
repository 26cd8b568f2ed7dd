"""
Custom exceptions for the Apaczka API client.
"""


class ApaczkaClientError(Exception):
    """Base exception for Apaczka client errors."""
    pass


class ConfigurationError(ApaczkaClientError):
    """Raised when client configuration is invalid."""
    pass


class HTTPError(ApaczkaClientError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
