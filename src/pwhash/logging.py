"""Logging setup for applications that verify credentials with pwhash.

Login code tends to bind the submitted password or the stored hash to its
log context. :func:`redact_secrets` masks those keys before any renderer
sees them, and :func:`configure_logging` installs it ahead of JSON output.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

import structlog

REDACTED = "***"
SECRET_KEYS = frozenset(
    {"password", "secret", "salt", "digest", "hash", "encoded", "password_hash"}
)


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor replacing credential material with ``***``."""

    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(level: int | str = logging.INFO) -> None:
    """Route pwhash events through stdlib logging as redacted JSON lines."""
    logging.basicConfig(level=level, format="%(message)s")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            redact_secrets,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


__all__ = ["REDACTED", "configure_logging", "redact_secrets"]
