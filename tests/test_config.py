import structlog
from structlog.testing import capture_logs

from tagvalid import Validator
from tagvalid.config import Settings, get_settings
from tagvalid.logger import configure_logging
from tagvalid.models import Response


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("VALIDATION_TAG_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.VALIDATION_TAG_KEY == "valid"
    assert settings.LOG_VALIDATION_RUNS is True


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_VALIDATION_RUNS", "false")
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "debug"
    assert settings.LOG_VALIDATION_RUNS is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_runs():
    configure_logging(level="warning", debug=True)
    configure_logging(level="info", debug=False)
    assert structlog.is_configured()
    structlog.reset_defaults()


def test_shape_failure_is_logged():
    with capture_logs() as logs:
        r = Validator().struct(42)
    assert r == Response(valid=False)
    assert logs == [{"event": "struct_shape_invalid", "value_type": "int", "log_level": "warning"}]
