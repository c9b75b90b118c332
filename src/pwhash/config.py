"""Environment driven settings for :class:`~pwhash.hasher.PasswordHasher`.

The module-level helpers in :mod:`pwhash` never consult these settings; they
always hash with :data:`~pwhash.params.DEFAULT_PARAMETERS`. Applications that
want to tune Argon2 costs per deployment build a hasher explicitly via
``PasswordHasher.from_settings()``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .params import DEFAULT_PARAMETERS, Argon2Parameters


class HasherSettings(BaseSettings):
    """Argon2id parameters for newly created hashes."""

    model_config = SettingsConfigDict(env_prefix="PWHASH_")

    time_cost: int = Field(
        default=DEFAULT_PARAMETERS.time_cost,
        ge=1,
        description="Argon2 passes over memory (t).",
    )
    memory_cost_kib: int = Field(
        default=DEFAULT_PARAMETERS.memory_cost,
        ge=8,
        description="Argon2 memory cost in KiB (m).",
    )
    parallelism: int = Field(
        default=DEFAULT_PARAMETERS.parallelism,
        ge=1,
        le=2**24 - 1,
        description="Argon2 lanes (p).",
    )
    hash_len: int = Field(
        default=DEFAULT_PARAMETERS.hash_len,
        ge=4,
        description="Length of the derived digest in bytes.",
    )
    salt_len: int = Field(
        default=DEFAULT_PARAMETERS.salt_len,
        ge=8,
        description="Length of the random salt in bytes.",
    )

    def to_parameters(self) -> Argon2Parameters:
        return Argon2Parameters(
            time_cost=self.time_cost,
            memory_cost=self.memory_cost_kib,
            parallelism=self.parallelism,
            hash_len=self.hash_len,
            salt_len=self.salt_len,
        )


__all__ = ["HasherSettings"]
