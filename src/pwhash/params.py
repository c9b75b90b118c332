"""Cost parameter parsing and the default Argon2id parameter set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .exceptions import ParameterError

ARGON2_REQUIRED_OPTIONS = ("m", "t", "p")
# Enough for any uint64 cost parameter.
MAX_INT_DIGITS = 20


@dataclass(frozen=True, slots=True)
class Argon2Parameters:
    """Argon2id cost settings used when creating new hashes."""

    time_cost: int = 1
    memory_cost: int = 64 * 1024  # KiB
    parallelism: int = 4
    hash_len: int = 32
    salt_len: int = 12

    def to_options(self) -> str:
        """Render the ``m=...,t=...,p=...`` option string."""

        return f"m={self.memory_cost},t={self.time_cost},p={self.parallelism}"

    def matches(self, options: Mapping[str, int]) -> bool:
        """Return ``True`` when parsed ``options`` carry these exact costs."""

        return (
            options.get("m") == self.memory_cost
            and options.get("t") == self.time_cost
            and options.get("p") == self.parallelism
        )


DEFAULT_PARAMETERS = Argon2Parameters()


def parse_int(value: str) -> int:
    """Parse a non-negative decimal integer written with ASCII digits."""

    if len(value) > MAX_INT_DIGITS:
        raise ParameterError("integer value is too long")
    if not value or not value.isascii() or not value.isdigit():
        raise ParameterError(f"expected a non-negative integer, got {value!r}")
    try:
        return int(value)
    except ValueError as exc:  # pragma: no cover - guarded above
        raise ParameterError("invalid integer value") from exc


def parse_options(text: str) -> dict[str, int]:
    """Parse an option list like ``m=65536,t=1,p=4`` into a mapping.

    Each comma separated segment is split on its first ``=``. Segments without
    ``=``, non-numeric values and repeated keys are rejected.
    """

    options: dict[str, int] = {}
    for segment in text.split(","):
        key, sep, value = segment.partition("=")
        if not sep:
            raise ParameterError(f"option {segment!r} has no value")
        if key in options:
            raise ParameterError(f"duplicate option {key!r}")
        options[key] = parse_int(value)
    return options


def require_options(options: Mapping[str, int], required: tuple[str, ...]) -> None:
    missing = [key for key in required if key not in options]
    if missing:
        raise ParameterError(f"missing options: {', '.join(missing)}")


__all__ = [
    "ARGON2_REQUIRED_OPTIONS",
    "Argon2Parameters",
    "DEFAULT_PARAMETERS",
    "parse_int",
    "parse_options",
    "require_options",
]
