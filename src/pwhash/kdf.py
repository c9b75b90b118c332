"""Thin adapters over the Argon2id and PBKDF2-HMAC-SHA256 primitives."""

from __future__ import annotations

import hashlib

from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .exceptions import ParameterError

ARGON2_MIN_SALT_LEN = 8
ARGON2_MIN_HASH_LEN = 4
ARGON2_MAX_PARALLELISM = 2**24 - 1
UINT32_MAX = 2**32 - 1
PBKDF2_MAX_ITERATIONS = 2**31 - 1


def argon2id(
    password: bytes,
    salt: bytes,
    *,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    hash_len: int,
) -> bytes:
    """Derive ``hash_len`` bytes with Argon2id (version 0x13).

    ``memory_cost`` is expressed in KiB. Errors from the primitive are not
    translated: callers are expected to pass parameters that satisfy
    :func:`check_argon2_bounds`.
    """

    return hash_secret_raw(
        secret=password,
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=hash_len,
        type=Type.ID,
        version=ARGON2_VERSION,
    )


def pbkdf2_sha256(
    password: bytes, salt: bytes, *, iterations: int, hash_len: int
) -> bytes:
    """Derive ``hash_len`` bytes with PBKDF2-HMAC-SHA256."""

    return hashlib.pbkdf2_hmac("sha256", password, salt, iterations, dklen=hash_len)


def check_argon2_bounds(
    *,
    salt_len: int,
    hash_len: int,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
) -> None:
    """Reject Argon2 inputs the primitive would refuse."""

    if salt_len < ARGON2_MIN_SALT_LEN:
        raise ParameterError("argon2 salt is too short")
    if not ARGON2_MIN_HASH_LEN <= hash_len <= UINT32_MAX:
        raise ParameterError("argon2 digest length out of range")
    if not 1 <= time_cost <= UINT32_MAX:
        raise ParameterError("argon2 time cost out of range")
    if not 1 <= parallelism <= ARGON2_MAX_PARALLELISM:
        raise ParameterError("argon2 parallelism out of range")
    if not 8 * parallelism <= memory_cost <= UINT32_MAX:
        raise ParameterError("argon2 memory cost out of range")


def check_pbkdf2_bounds(*, iterations: int, hash_len: int) -> None:
    """Reject PBKDF2 inputs the primitive would refuse."""

    if not 1 <= iterations <= PBKDF2_MAX_ITERATIONS:
        raise ParameterError("pbkdf2 iteration count out of range")
    if not 1 <= hash_len <= PBKDF2_MAX_ITERATIONS:
        raise ParameterError("pbkdf2 digest length out of range")


__all__ = [
    "argon2id",
    "check_argon2_bounds",
    "check_pbkdf2_bounds",
    "pbkdf2_sha256",
]
