"""Recognition and field extraction for the supported hash string formats.

Four dialects are understood, checked in this order (first match wins):

* ``$argon2id$v=19$m=..,t=..,p=..$<salt>$<digest>`` emitted by the argon2
  command-line utility;
* ``$argon2id$m=..,t=..,p=..$<salt>$<digest>``, the PHC string without a
  version field;
* ``$pbkdf2-sha256$<iterations>$<salt>$<digest>`` as written by Python
  hashlib/passlib helpers, with MCF-flavoured base64;
* ``pbkdf2_sha256$<iterations>$<salt>$<digest>`` as stored by Django, where
  the salt is used verbatim instead of being base64 decoded.

The two Argon2 prefixes overlap, only the field count tells them apart, so
the rule order below is significant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Mapping, Sequence

from .encoding import decode_base64
from .exceptions import DecodeError, UnsupportedFormatError
from .params import ARGON2_REQUIRED_OPTIONS, parse_int, parse_options, require_options

FIELD_SEPARATOR = "$"
MIN_FIELDS = 4


class KdfFamily(StrEnum):
    """Key derivation function a format maps to."""

    ARGON2ID = "argon2id"
    PBKDF2_SHA256 = "pbkdf2_sha256"


class HashFormat(StrEnum):
    """Encoded hash dialects accepted by the verifier."""

    ARGON2ID_UTILITY = "argon2id_utility"
    ARGON2ID_PHC = "argon2id_phc"
    PBKDF2_SHA256_PYTHON = "pbkdf2_sha256_python"
    PBKDF2_SHA256_DJANGO = "pbkdf2_sha256_django"

    @property
    def family(self) -> KdfFamily:
        if self in (HashFormat.ARGON2ID_UTILITY, HashFormat.ARGON2ID_PHC):
            return KdfFamily.ARGON2ID
        return KdfFamily.PBKDF2_SHA256


@dataclass(frozen=True, slots=True)
class ParsedHash:
    """Decoded fields of one encoded hash."""

    format: HashFormat
    salt: bytes
    digest: bytes
    options: Mapping[str, int] = field(default_factory=dict)
    iterations: int = 0

    @property
    def family(self) -> KdfFamily:
        return self.format.family


def _argon2(fmt: HashFormat, options: str, salt: str, digest: str) -> ParsedHash:
    parsed_options = parse_options(options)
    raw_digest = decode_base64(digest)
    raw_salt = decode_base64(salt)
    require_options(parsed_options, ARGON2_REQUIRED_OPTIONS)
    return ParsedHash(
        format=fmt, salt=raw_salt, digest=raw_digest, options=parsed_options
    )


def _verbatim_salt(value: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise DecodeError("salt is not valid UTF-8 text") from exc


def _pbkdf2(fmt: HashFormat, iterations: str, salt: bytes, digest: str) -> ParsedHash:
    return ParsedHash(
        format=fmt,
        salt=salt,
        digest=decode_base64(digest),
        iterations=parse_int(iterations),
    )


@dataclass(frozen=True, slots=True)
class _FormatRule:
    format: HashFormat
    prefix: str
    field_count: int
    extract: Callable[[Sequence[str]], ParsedHash]

    def matches(self, encoded: str, parts: Sequence[str]) -> bool:
        return encoded.startswith(self.prefix) and len(parts) == self.field_count


_RULES: tuple[_FormatRule, ...] = (
    _FormatRule(
        HashFormat.ARGON2ID_UTILITY,
        "$argon2id$v=19$",
        6,
        lambda parts: _argon2(HashFormat.ARGON2ID_UTILITY, parts[3], parts[4], parts[5]),
    ),
    _FormatRule(
        HashFormat.ARGON2ID_PHC,
        "$argon2id$",
        5,
        lambda parts: _argon2(HashFormat.ARGON2ID_PHC, parts[2], parts[3], parts[4]),
    ),
    _FormatRule(
        HashFormat.PBKDF2_SHA256_PYTHON,
        "$pbkdf2-sha256$",
        5,
        lambda parts: _pbkdf2(
            HashFormat.PBKDF2_SHA256_PYTHON,
            parts[2],
            decode_base64(parts[3]),
            parts[4],
        ),
    ),
    _FormatRule(
        HashFormat.PBKDF2_SHA256_DJANGO,
        "pbkdf2_sha256$",
        4,
        # Django stores the salt as plain text and feeds it to PBKDF2 as-is.
        lambda parts: _pbkdf2(
            HashFormat.PBKDF2_SHA256_DJANGO,
            parts[1],
            _verbatim_salt(parts[2]),
            parts[3],
        ),
    ),
)


def _match(encoded: str) -> tuple[_FormatRule, list[str]]:
    parts = encoded.split(FIELD_SEPARATOR)
    if len(parts) < MIN_FIELDS:
        raise UnsupportedFormatError("too few fields")
    for rule in _RULES:
        if rule.matches(encoded, parts):
            return rule, parts
    raise UnsupportedFormatError("unrecognized hash format")


def parse_hash(encoded: str) -> ParsedHash:
    """Split ``encoded`` into its format, salt, digest and cost parameters.

    Raises a :class:`~pwhash.exceptions.PwHashError` subclass when the string
    is not one of the known formats or one of its fields cannot be decoded.
    """

    rule, parts = _match(encoded)
    return rule.extract(parts)


def identify(encoded: str) -> HashFormat | None:
    """Return the format ``encoded`` would be verified as, if any."""

    try:
        rule, _ = _match(encoded)
    except UnsupportedFormatError:
        return None
    return rule.format


__all__ = [
    "FIELD_SEPARATOR",
    "HashFormat",
    "KdfFamily",
    "ParsedHash",
    "identify",
    "parse_hash",
]
