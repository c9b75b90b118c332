from __future__ import annotations

import pytest

from pwhash.exceptions import (
    DecodeError,
    ParameterError,
    PwHashError,
    UnsupportedFormatError,
)
from pwhash.formats import HashFormat, KdfFamily, identify, parse_hash

pytestmark = pytest.mark.unit

UTILITY = "$argon2id$v=19$m=4096,t=3,p=1$dGhpc2lzbXlzYWx0$AAAAAA"


def test_parse_utility_format_fields() -> None:
    parsed = parse_hash(UTILITY)

    assert parsed.format is HashFormat.ARGON2ID_UTILITY
    assert parsed.family is KdfFamily.ARGON2ID
    assert parsed.options == {"m": 4096, "t": 3, "p": 1}
    assert parsed.salt == b"thisismysalt"
    assert parsed.digest == b"\x00\x00\x00\x00"


def test_parse_phc_format_fields() -> None:
    parsed = parse_hash("$argon2id$m=8,t=2,p=1$dGhpc2lzbXlzYWx0$AAAAAA")

    assert parsed.format is HashFormat.ARGON2ID_PHC
    assert parsed.options == {"m": 8, "t": 2, "p": 1}


def test_parse_python_pbkdf2_decodes_salt() -> None:
    parsed = parse_hash("$pbkdf2-sha256$1000$dGhpc2lzbXlzYWx0$AAAAAA")

    assert parsed.format is HashFormat.PBKDF2_SHA256_PYTHON
    assert parsed.family is KdfFamily.PBKDF2_SHA256
    assert parsed.iterations == 1000
    assert parsed.salt == b"thisismysalt"


def test_parse_django_pbkdf2_keeps_salt_verbatim() -> None:
    parsed = parse_hash("pbkdf2_sha256$1000$dGhpc2lzbXlzYWx0$AAAAAA")

    assert parsed.format is HashFormat.PBKDF2_SHA256_DJANGO
    assert parsed.salt == b"dGhpc2lzbXlzYWx0"
    assert parsed.iterations == 1000


def test_django_salt_may_contain_non_base64_characters() -> None:
    parsed = parse_hash("pbkdf2_sha256$1000$s@lt!$AAAAAA")

    assert parsed.salt == b"s@lt!"


@pytest.mark.parametrize(
    ("encoded", "expected"),
    [
        pytest.param(UTILITY, HashFormat.ARGON2ID_UTILITY, id="utility"),
        pytest.param("$argon2id$x$y$z", HashFormat.ARGON2ID_PHC, id="phc-by-count"),
        pytest.param("$pbkdf2-sha256$a$b$c", HashFormat.PBKDF2_SHA256_PYTHON, id="python"),
        pytest.param("pbkdf2_sha256$a$b$c", HashFormat.PBKDF2_SHA256_DJANGO, id="django"),
        pytest.param("not-a-hash", None, id="no-separator"),
        pytest.param("$argon2id$", None, id="too-few-fields"),
        pytest.param("$argon2id$v=16$m=8,t=1,p=1$c2FsdHNhbHQ$AAAAAA", None, id="other-version"),
        pytest.param("$argon2id$v=19$m=8$x$y$z$w", None, id="too-many-fields"),
        pytest.param("$argon2i$v=19$m=8,t=1,p=1$c2FsdHNhbHQ$AAAAAA", None, id="argon2i"),
        pytest.param("$pbkdf2-sha256$1$a$b$c", None, id="python-extra-field"),
        pytest.param("pbkdf2_sha256$1$a$b$c", None, id="django-extra-field"),
        pytest.param("$pbkdf2_sha256$1$a$b", None, id="django-leading-separator"),
        pytest.param("$2b$12$abcdefghijklmnopqrstuv", None, id="bcrypt"),
    ],
)
def test_identify(encoded: str, expected: HashFormat | None) -> None:
    assert identify(encoded) is expected


def test_parse_hash_unrecognized() -> None:
    with pytest.raises(UnsupportedFormatError):
        parse_hash("not-a-hash")


@pytest.mark.parametrize(
    ("encoded", "error"),
    [
        pytest.param(
            "$argon2id$v=19$m=1,m=2,t=1,p=1$c2FsdHNhbHQ$AAAAAA",
            ParameterError,
            id="duplicate-option",
        ),
        pytest.param(
            "$argon2id$v=19$m=8,t=1$c2FsdHNhbHQ$AAAAAA",
            ParameterError,
            id="missing-parallelism",
        ),
        pytest.param(
            "$argon2id$v=19$m=8,t=1,p=1$c2Fs*dHNhbHQ$AAAAAA",
            DecodeError,
            id="bad-salt",
        ),
        pytest.param(
            "$argon2id$v=19$m=8,t=1,p=1$c2FsdHNhbHQ$AAAAA",
            DecodeError,
            id="bad-digest-length",
        ),
        pytest.param("pbkdf2_sha256$many$salt$AAAAAA", ParameterError, id="bad-iterations"),
        pytest.param("$pbkdf2-sha256$1000$c!lt$AAAAAA", DecodeError, id="bad-python-salt"),
    ],
)
def test_parse_hash_rejects_malformed_fields(encoded: str, error: type[PwHashError]) -> None:
    with pytest.raises(error):
        parse_hash(encoded)


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        parse_hash("$argon2id$v=19$m=1,m=2$c2FsdHNhbHQ$AAAAAA")


def test_django_salt_with_lone_surrogate_is_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        parse_hash("pbkdf2_sha256$1000$s\udc80lt$AAAAAA")
