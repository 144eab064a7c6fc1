"""
Custom exceptions for the Aliyun OAuth client library.
"""


class OAuthClientError(Exception):
    """Base exception for OAuth client errors."""
    pass


class TransportError(OAuthClientError):
    """Raised when the HTTP request itself fails (connection, timeout)."""
    pass


class ParseError(OAuthClientError):
    """Raised when a response body cannot be decoded."""
    pass


class ApiError(OAuthClientError):
    """Raised when the account service answers with an errorCode."""

    def __init__(self, message, code=None, payload=None):
        super().__init__(f"OpenAPI: {message}")
        self.message = message
        self.code = code
        self.payload = payload


class CallerError(OAuthClientError):
    """Raised for invalid input, before any request is sent."""
    pass


class ConfigurationError(CallerError):
    """Raised when client configuration is invalid."""
    pass
