from __future__ import annotations
import logging
import os

"""Environment-driven settings.

Each helper reads its variable on every call so tests and long-lived processes
see overrides immediately.
"""

DEFAULT_JWT_SECRET = "this_is_secret"
DEFAULT_HTTP_PORT = 8080
DEFAULT_LOG_LEVEL = "WARNING"


def log_level() -> int:
    name = os.getenv("RCLI_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"RCLI_LOG_LEVEL must be a logging level name, got {name!r}")
    return level


def jwt_secret() -> str:
    return os.getenv("RCLI_JWT_SECRET") or DEFAULT_JWT_SECRET


def http_port() -> int:
    override = os.getenv("RCLI_HTTP_PORT")
    if override:
        try:
            return int(override)
        except ValueError as exc:
            raise ValueError("RCLI_HTTP_PORT must be an integer") from exc
    return DEFAULT_HTTP_PORT
