# tests/shared/test_config.py
import structlog

from genere.shared.config import AppEnv, LogFormat, Settings
from genere.shared.logging_config import add_open_telemetry_spans, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GENERE_DEFAULT_SEED", raising=False)
        settings = Settings(_env_file=None)
        assert settings.APP_NAME == "genere"
        assert settings.APP_ENV == AppEnv.DEVELOPMENT
        assert settings.DEFAULT_SEED is None
        assert settings.TABLE_ENCODING == "utf-8"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GENERE_DEFAULT_SEED", "7")
        monkeypatch.setenv("GENERE_LOG_FORMAT", "json")
        settings = Settings(_env_file=None)
        assert settings.DEFAULT_SEED == 7
        assert settings.LOG_FORMAT == LogFormat.JSON


class TestLogging:
    def test_configure_logging(self):
        configure_logging("debug")
        assert structlog.is_configured()

    def test_span_ids_without_active_span(self):
        event = add_open_telemetry_spans(None, "info", {"event": "x"})
        assert event["trace_id"] is None
        assert event["span_id"] is None
