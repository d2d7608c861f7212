"""
Geo-6 POI provider exceptions

This module defines the exception hierarchy for the Geo-6 POI provider.
All provider errors inherit from Geo6Error base class. Transport errors
raised by httpx are not wrapped and reach the caller unchanged.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class Geo6Error(Exception):
    """
    Base exception for all Geo-6 POI provider errors.

    Catch this to handle any provider error generically.
    """

    pass


class UnsupportedOperation(Geo6Error):
    """
    Raised when the requested operation is not supported by the API.

    This happens for:
    - Reverse geocoding (coordinates to address)
    - IP address lookups (the API searches streets and POIs only)
    """

    pass


class InvalidArgument(Geo6Error):
    """
    Raised when a query argument is invalid.

    This happens for an empty or blank query text, or an unsupported
    extraction language (only "fr" and "nl" are known).
    """

    pass


class ConfigurationError(Geo6Error):
    """
    Raised when the provider configuration is invalid.

    This exception is raised when:
    - The private key is empty or cannot be used by the signing algorithm
    - Required configuration values are missing
    - The API generation name is not recognized
    """

    pass


class InvalidServerResponse(Geo6Error):
    """
    Raised when the API answers with something we cannot use, dood!

    Args:
        message: Description of the problem
        url: Requested URL, kept for diagnostics
        statusCode: HTTP status code (if the problem is the status itself)
    """

    def __init__(self, message: str, url: str, statusCode: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.url = url
        self.statusCode = statusCode
        logger.debug(f"InvalidServerResponse: {message} (url: {url}, status: {statusCode})")

    @classmethod
    def create(cls, url: str) -> "InvalidServerResponse":
        """Build the error for a body that could not be parsed."""
        return cls(f'The geocoder server returned an invalid response for query "{url}".', url)

    @classmethod
    def emptyResponse(cls, url: str) -> "InvalidServerResponse":
        """Build the error for an empty body."""
        return cls(f'The geocoder server returned an empty response for query "{url}".', url)

    @classmethod
    def forStatusCode(cls, url: str, statusCode: int) -> "InvalidServerResponse":
        """Build the error for an unexpected HTTP status."""
        return cls(
            f'The geocoder server returned an invalid response ({statusCode}) for query "{url}".',
            url,
            statusCode,
        )

    def __str__(self) -> str:
        return self.message


class InvalidCredentials(InvalidServerResponse):
    """Raised when the API rejects our credentials (HTTP 401/403)."""

    pass


class QuotaExceeded(InvalidServerResponse):
    """Raised when the API quota is exhausted (HTTP 429)."""

    pass
