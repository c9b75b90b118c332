"""Argon2id password hashing with verification of legacy hash formats.

New hashes are always written as ``$argon2id$v=19$m=65536,t=1,p=4$...``.
Verification additionally accepts PHC Argon2id strings and PBKDF2-SHA256
hashes in the Python (``$pbkdf2-sha256$``) and Django (``pbkdf2_sha256$``)
layouts, so stored credentials can be migrated lazily::

    if not verify_password(password, user.password_hash):
        raise InvalidCredentials()
    if needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)
"""

from .exceptions import DecodeError, ParameterError, PwHashError, UnsupportedFormatError
from .formats import HashFormat, KdfFamily, ParsedHash, identify, parse_hash
from .hasher import PasswordHasher, hash_password, needs_rehash, verify_password
from .params import DEFAULT_PARAMETERS, Argon2Parameters

__all__ = [
    "Argon2Parameters",
    "DEFAULT_PARAMETERS",
    "DecodeError",
    "HashFormat",
    "KdfFamily",
    "ParameterError",
    "ParsedHash",
    "PasswordHasher",
    "PwHashError",
    "UnsupportedFormatError",
    "hash_password",
    "identify",
    "needs_rehash",
    "parse_hash",
    "verify_password",
]
