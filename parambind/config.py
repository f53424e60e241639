"""Environment-driven settings and logging setup."""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

ALLOWED_ENVS = {"dev", "prod"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    """Runtime settings populated from the environment."""

    environment: str = "dev"
    debug: bool = False
    log_level: str = "INFO"
    body_encoding: str = "utf-8"
    max_upload_size: int | None = None
    session_cookie: str = "SESSION"


def validate_settings(settings: Settings) -> None:
    """Validate *settings* for safe operation.

    Raises
    ------
    ValueError
        If a value is unsupported or if production settings are insecure.
    """

    env = settings.environment
    if env not in ALLOWED_ENVS:
        raise ValueError(f"Unsupported environment: {env}")
    if env == "prod" and settings.debug:
        raise ValueError("Debug must be disabled in production")
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(f"Unsupported log level: {settings.log_level}")
    try:
        codecs.lookup(settings.body_encoding)
    except LookupError as exc:
        raise ValueError(f"Unknown body encoding: {settings.body_encoding}") from exc
    if settings.max_upload_size is not None and settings.max_upload_size < 0:
        raise ValueError("max_upload_size must not be negative")
    if not settings.session_cookie.strip():
        raise ValueError("session_cookie must not be blank")


def load_settings() -> Settings:
    """Return configuration derived from ``PARAMBIND_*`` variables."""

    env = os.getenv("PARAMBIND_ENV", "dev").lower()
    debug = os.getenv("PARAMBIND_DEBUG", "0").lower() in {"1", "true", "yes"}
    log_level = os.getenv("PARAMBIND_LOG_LEVEL", "DEBUG" if debug else "INFO")
    raw_limit = os.getenv("PARAMBIND_MAX_UPLOAD_SIZE", "").strip()
    try:
        max_upload = int(raw_limit) if raw_limit else None
    except ValueError as exc:
        raise ValueError(f"Invalid PARAMBIND_MAX_UPLOAD_SIZE: {raw_limit}") from exc
    settings = Settings(
        environment=env,
        debug=debug,
        log_level=log_level.upper(),
        body_encoding=os.getenv("PARAMBIND_BODY_ENCODING", "utf-8"),
        max_upload_size=max_upload,
        session_cookie=os.getenv("PARAMBIND_SESSION_COOKIE", "SESSION"),
    )
    validate_settings(settings)
    return settings


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply ``settings.log_level`` to the ``parambind`` logger and return it."""

    logger = logging.getLogger("parambind")
    logger.setLevel(getattr(logging, settings.log_level))
    return logger


__all__ = [
    "ALLOWED_ENVS",
    "LOG_LEVELS",
    "Settings",
    "configure_logging",
    "load_settings",
    "validate_settings",
]
