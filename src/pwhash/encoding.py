"""Base64 helpers tolerant of the dialects found in stored hashes."""

from __future__ import annotations

import base64
import binascii
import re

from .exceptions import DecodeError

_STANDARD_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")
_DIALECT_TABLE = str.maketrans({".": "+", "-": "+", "_": "/"})


def decode_base64(token: str) -> bytes:
    """Decode ``token`` written in any common base64 dialect.

    Trailing ``=`` padding is optional, ``.`` (MCF) and ``-``/``_`` (URL-safe)
    are mapped onto the standard alphabet before decoding.
    """

    normalized = token.rstrip("=").translate(_DIALECT_TABLE)
    if _STANDARD_ALPHABET.fullmatch(normalized) is None:
        raise DecodeError("base64 value contains invalid characters")
    if len(normalized) % 4 == 1:
        raise DecodeError("base64 value has invalid length")
    padded = normalized + "=" * (-len(normalized) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as exc:  # pragma: no cover - guarded above
        raise DecodeError("invalid base64 value") from exc


def encode_base64(raw: bytes) -> str:
    """Return unpadded standard base64 for ``raw``."""

    return base64.b64encode(raw).decode("ascii").rstrip("=")


__all__ = ["decode_base64", "encode_base64"]
