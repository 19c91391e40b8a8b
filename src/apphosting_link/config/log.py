"""Log level settings read from ``APPHOSTING_LOG`` or ``-v`` flags."""

from __future__ import annotations

import logging
import sys
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apphosting_link.config.loader import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class LogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="APPHOSTING_")

    log: LogLevel | None = None

    @field_validator("log", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value


def resolve_log_level(verbose: int) -> int | None:
    """Level for the ``apphosting_link`` loggers, or None to leave logging alone.

    ``APPHOSTING_LOG`` wins over ``-v`` (info) and ``-vv`` (debug).

    Raises:
        ConfigError: ``APPHOSTING_LOG`` is not a level name.
    """
    try:
        settings = LogSettings()
    except ValidationError as exc:
        raise ConfigError(
            "APPHOSTING_LOG must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        ) from exc
    if settings.log is not None:
        return getattr(logging, settings.log)
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return None


def configure_logging(verbose: int) -> None:
    level = resolve_log_level(verbose)
    if level is None:
        return
    logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT, stream=sys.stderr, force=True)
    logging.getLogger("apphosting_link").setLevel(level)
