"""Error taxonomy for tagsearch."""

from typing import Optional


class TagSearchError(Exception):
    """Base class for all tagsearch errors."""


class TransportError(TagSearchError):
    """Network failure or non-success HTTP status from the search API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(TagSearchError):
    """Response body does not match the expected envelope shape."""


class ConfigurationError(TagSearchError):
    """Invalid credential, settings or month range."""
