"""Tests for FpcoreSettings and configure_structlog."""

from __future__ import annotations

import pytest
import structlog
from pydantic import ValidationError

from fpcore.config import FpcoreSettings, RetrySettings, configure_structlog, get_settings


class TestSettings:
    def test_defaults(self):
        settings = FpcoreSettings()
        assert settings.retry == RetrySettings(max_tries=10, delay_seconds=1.0)
        assert settings.log_level == "INFO"

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("FPCORE_RETRY__MAX_TRIES", "3")
        monkeypatch.setenv("FPCORE_RETRY__DELAY_SECONDS", "0.25")
        settings = FpcoreSettings()
        assert settings.retry.max_tries == 3
        assert settings.retry.delay_seconds == 0.25

    def test_log_level_is_normalised(self, monkeypatch):
        monkeypatch.setenv("FPCORE_LOG_LEVEL", " debug ")
        assert FpcoreSettings().log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("FPCORE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError, match="log_level must be one of"):
            FpcoreSettings()

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            RetrySettings(delay_seconds=-1)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_env_file_is_read_from_working_directory_at_load_time(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FPCORE_LOG_LEVEL=debug\nFPCORE_RETRY__MAX_TRIES=2\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        settings = FpcoreSettings()
        assert settings.log_level == "DEBUG"
        assert settings.retry.max_tries == 2

    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FPCORE_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("FPCORE_LOG_LEVEL", "ERROR")
        assert FpcoreSettings().log_level == "ERROR"

    def test_log_format_is_normalised(self, monkeypatch):
        monkeypatch.setenv("FPCORE_LOG_FORMAT", " JSON")
        assert FpcoreSettings().log_format == "json"

    def test_invalid_log_format_rejected(self, monkeypatch):
        monkeypatch.setenv("FPCORE_LOG_FORMAT", "xml")
        with pytest.raises(ValidationError, match="log_format must be one of"):
            FpcoreSettings()


class TestConfigureStructlog:
    @pytest.fixture(autouse=True)
    def _reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_installs_console_renderer(self):
        configure_structlog("DEBUG")
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)
        assert config["cache_logger_on_first_use"] is False

    def test_falls_back_to_settings_level(self, monkeypatch):
        monkeypatch.setenv("FPCORE_LOG_LEVEL", "WARNING")
        configure_structlog()
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(30)

    def test_json_format_installs_json_renderer(self):
        configure_structlog("INFO", "json")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.processors.dict_tracebacks in processors

    def test_format_falls_back_to_settings(self, monkeypatch):
        monkeypatch.setenv("FPCORE_LOG_FORMAT", "json")
        configure_structlog()
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
