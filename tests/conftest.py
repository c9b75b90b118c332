from __future__ import annotations

import pytest

from pwhash import Argon2Parameters, PasswordHasher

# Minimum Argon2 costs so property tests stay fast; defaults are exercised
# separately by the round-trip tests in ``unit/test_hasher.py``.
FAST_PARAMETERS = Argon2Parameters(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    return PasswordHasher(parameters=FAST_PARAMETERS)


@pytest.fixture(autouse=True)
def _clear_pwhash_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PWHASH_TIME_COST",
        "PWHASH_MEMORY_COST_KIB",
        "PWHASH_PARALLELISM",
        "PWHASH_HASH_LEN",
        "PWHASH_SALT_LEN",
    ):
        monkeypatch.delenv(name, raising=False)
