"""
Configuration — library defaults loaded from environment/.env, plus logging setup.

Uses pydantic-settings so that defaults can be tuned without code changes:

    FPCORE_LOG_LEVEL=DEBUG
    FPCORE_LOG_FORMAT=json
    FPCORE_RETRY__MAX_TRIES=5
    FPCORE_RETRY__DELAY_SECONDS=0.5

Only FpcoreSettings is a BaseSettings instance. RetrySettings is a plain
BaseModel populated through env_nested_delimiter="__", so the env var
FPCORE_RETRY__MAX_TRIES maps to retry.max_tries.

The .env file is looked up in the working directory each time settings are
loaded, not when this module is imported. get_settings() caches the first
load; get_settings.cache_clear() forces a fresh one.

The library never configures logging on import. Applications that want
fpcore's structured log events rendered call configure_structlog().
"""

from __future__ import annotations

import logging
from functools import lru_cache

import structlog
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_FORMATS = ("console", "json")


class RetrySettings(BaseModel):
    """
    Defaults for Retry builders.

    max_tries <= 0 means retry forever.
    """

    max_tries: int = Field(default=10, description="Attempts before giving up (<= 0: forever)")
    delay_seconds: float = Field(default=1.0, ge=0, description="Pause between attempts")


class FpcoreSettings(BaseSettings):
    """
    Root settings.

    Load order (highest priority first):
      1. Environment variables (FPCORE_*)
      2. .env file in the working directory at load time
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="FPCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    retry: RetrySettings = Field(default_factory=RetrySettings)
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names case-insensitively."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(_LOG_FORMATS)}, got {value!r}")
        return fmt


@lru_cache(maxsize=1)
def get_settings() -> FpcoreSettings:
    """Load settings once; call get_settings.cache_clear() to reload."""
    return FpcoreSettings()


def configure_structlog(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Route fpcore's structured events through structlog.

    Meant for applications and scripts; the library itself never calls it.
    log_level and log_format fall back to FPCORE_LOG_LEVEL / FPCORE_LOG_FORMAT.
    "console" renders colored lines for a terminal, "json" renders one JSON
    object per line with tracebacks as dicts.

    Loggers are not cached on first use, so a host application can call
    structlog.configure() again later and fpcore's loggers follow it.
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    fmt = (log_format or settings.log_format).lower()

    shared: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if fmt == "json":
        renderers = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=shared + renderers,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
