"""Error hierarchy for hash parsing and verification."""

from __future__ import annotations

__all__ = [
    "PwHashError",
    "DecodeError",
    "ParameterError",
    "UnsupportedFormatError",
]


class PwHashError(ValueError):
    """Base class for failures caused by an encoded hash string."""


class DecodeError(PwHashError):
    """Raised when a salt or digest field is not valid base64."""


class ParameterError(PwHashError):
    """Raised when cost parameters are malformed or out of range."""


class UnsupportedFormatError(PwHashError):
    """Raised when an encoded hash matches none of the known formats."""
