"""Fetch tagged search results month by month into CSV files."""

from .errors import ConfigurationError, DecodeError, TagSearchError, TransportError

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "TagSearchError",
    "TransportError",
]
