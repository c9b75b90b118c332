"""Password hashing and multi-format verification."""

from __future__ import annotations

import hmac
import secrets
from dataclasses import dataclass

import structlog

from .config import HasherSettings
from .encoding import encode_base64
from .exceptions import PwHashError
from .formats import (
    FIELD_SEPARATOR,
    HashFormat,
    KdfFamily,
    ParsedHash,
    identify,
    parse_hash,
)
from .kdf import argon2id, check_argon2_bounds, check_pbkdf2_bounds, pbkdf2_sha256
from .params import DEFAULT_PARAMETERS, Argon2Parameters

logger = structlog.get_logger(__name__)

ARGON2_UTILITY_PREFIX = "$argon2id$v=19$"


def _to_bytes(password: str | bytes) -> bytes:
    if isinstance(password, bytes):
        return password
    if isinstance(password, str):
        return password.encode("utf-8")
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


def _recompute(password: bytes, parsed: ParsedHash) -> bytes:
    """Run the KDF named by ``parsed`` with the parameters it carries."""

    hash_len = len(parsed.digest)
    if parsed.family is KdfFamily.ARGON2ID:
        options = parsed.options
        check_argon2_bounds(
            salt_len=len(parsed.salt),
            hash_len=hash_len,
            time_cost=options["t"],
            memory_cost=options["m"],
            parallelism=options["p"],
        )
        return argon2id(
            password,
            parsed.salt,
            time_cost=options["t"],
            memory_cost=options["m"],
            parallelism=options["p"],
            hash_len=hash_len,
        )
    check_pbkdf2_bounds(iterations=parsed.iterations, hash_len=hash_len)
    return pbkdf2_sha256(
        password, parsed.salt, iterations=parsed.iterations, hash_len=hash_len
    )


@dataclass(frozen=True, slots=True)
class PasswordHasher:
    """Create Argon2id hashes and verify hashes in any supported format."""

    parameters: Argon2Parameters = DEFAULT_PARAMETERS

    @classmethod
    def from_settings(cls, settings: HasherSettings | None = None) -> "PasswordHasher":
        """Build a hasher from ``PWHASH_*`` environment settings."""

        settings = settings or HasherSettings()
        return cls(parameters=settings.to_parameters())

    def hash(self, password: str | bytes) -> str:
        """Return a new ``$argon2id$v=19$...`` string for ``password``.

        A fresh random salt is drawn for every call, so hashing the same
        password twice yields different strings.
        """

        params = self.parameters
        salt = secrets.token_bytes(params.salt_len)
        digest = argon2id(
            _to_bytes(password),
            salt,
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.hash_len,
        )
        return (
            ARGON2_UTILITY_PREFIX
            + FIELD_SEPARATOR.join(
                (params.to_options(), encode_base64(salt), encode_base64(digest))
            )
        )

    def verify(self, password: str | bytes, encoded: str) -> bool:
        """Return ``True`` iff ``password`` matches ``encoded``.

        Malformed, truncated or foreign hash strings are reported exactly like
        a wrong password: the result is ``False`` and nothing is raised.
        """

        if not isinstance(password, (str, bytes)) or not isinstance(encoded, str):
            return False
        try:
            secret = _to_bytes(password)
        except UnicodeEncodeError:
            logger.debug("hash.verify.rejected", reason="password is not valid text")
            return False
        try:
            parsed = parse_hash(encoded)
            if not parsed.digest:
                return False
            computed = _recompute(secret, parsed)
        except PwHashError as exc:
            logger.debug(
                "hash.verify.rejected", reason=str(exc), format=identify(encoded)
            )
            return False
        return hmac.compare_digest(computed, parsed.digest)

    def needs_rehash(self, encoded: str) -> bool:
        """Return ``True`` unless ``encoded`` uses this hasher's Argon2 costs."""

        if not isinstance(encoded, str):
            return True
        try:
            parsed = parse_hash(encoded)
        except PwHashError:
            return True
        if parsed.format is not HashFormat.ARGON2ID_UTILITY:
            return True
        return not (
            self.parameters.matches(parsed.options)
            and len(parsed.digest) == self.parameters.hash_len
        )


default_hasher = PasswordHasher()


def hash_password(password: str | bytes) -> str:
    """Hash ``password`` with the fixed default Argon2id parameters."""

    return default_hasher.hash(password)


def verify_password(password: str | bytes, encoded: str) -> bool:
    """Check ``password`` against ``encoded`` in constant time."""

    return default_hasher.verify(password, encoded)


def needs_rehash(encoded: str) -> bool:
    """Return ``True`` when ``encoded`` should be replaced by a fresh hash."""

    return default_hasher.needs_rehash(encoded)


__all__ = [
    "PasswordHasher",
    "default_hasher",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
