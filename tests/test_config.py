"""Environment-driven settings and logger configuration."""

import logging

import pytest

from parambind import Settings, configure_logging, load_settings
from parambind.config import validate_settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "PARAMBIND_ENV",
        "PARAMBIND_DEBUG",
        "PARAMBIND_LOG_LEVEL",
        "PARAMBIND_BODY_ENCODING",
        "PARAMBIND_MAX_UPLOAD_SIZE",
        "PARAMBIND_SESSION_COOKIE",
    ):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings()


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.delenv("PARAMBIND_DEBUG", raising=False)
    monkeypatch.setenv("PARAMBIND_ENV", "PROD")
    monkeypatch.setenv("PARAMBIND_LOG_LEVEL", "warning")
    monkeypatch.setenv("PARAMBIND_BODY_ENCODING", "latin-1")
    monkeypatch.setenv("PARAMBIND_MAX_UPLOAD_SIZE", "1024")
    monkeypatch.setenv("PARAMBIND_SESSION_COOKIE", "sid")
    settings = load_settings()
    assert settings.environment == "prod"
    assert settings.log_level == "WARNING"
    assert settings.body_encoding == "latin-1"
    assert settings.max_upload_size == 1024
    assert settings.session_cookie == "sid"


def test_debug_implies_debug_logging(monkeypatch) -> None:
    monkeypatch.delenv("PARAMBIND_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PARAMBIND_ENV", raising=False)
    monkeypatch.setenv("PARAMBIND_DEBUG", "true")
    settings = load_settings()
    assert settings.debug
    assert settings.log_level == "DEBUG"


def test_invalid_upload_size(monkeypatch) -> None:
    monkeypatch.setenv("PARAMBIND_MAX_UPLOAD_SIZE", "lots")
    with pytest.raises(ValueError, match="PARAMBIND_MAX_UPLOAD_SIZE"):
        load_settings()


@pytest.mark.parametrize(
    "settings,message",
    [
        (Settings(environment="staging"), "Unsupported environment"),
        (Settings(environment="prod", debug=True), "Debug must be disabled"),
        (Settings(log_level="LOUD"), "Unsupported log level"),
        (Settings(body_encoding="klingon"), "Unknown body encoding"),
        (Settings(max_upload_size=-1), "must not be negative"),
        (Settings(session_cookie=" "), "must not be blank"),
    ],
)
def test_validate_settings_rejects(settings: Settings, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        validate_settings(settings)


def test_configure_logging_sets_level() -> None:
    logger = configure_logging(Settings(log_level="DEBUG"))
    try:
        assert logger.name == "parambind"
        assert logger.level == logging.DEBUG
        assert logging.getLogger("parambind.routing").getEffectiveLevel() == logging.DEBUG
    finally:
        logger.setLevel(logging.NOTSET)
