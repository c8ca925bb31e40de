"""
Configuration management for the indicator library.
Loads settings from environment variables with sensible defaults.

Recognised variables (all optional):
    TASTREAM_LOG_LEVEL     Level for the "tastream" logger (default WARNING)
    TASTREAM_LOG_DIR       Directory for daily log files (default: console only)
    TASTREAM_LOG_COLOR     Colored console output, "true"/"false" (default true)
    TASTREAM_EMA_PERIOD    Factory default period for "ema"
    TASTREAM_DEMA_PERIOD   Factory default period for "dema"
    TASTREAM_TRIX_PERIOD   Factory default period for "trix"
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_DEMA_PERIOD,
    DEFAULT_EMA_PERIOD,
    DEFAULT_TRIX_PERIOD,
    ENV_PREFIX,
)


_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_dir: Optional[str] = None
    colored: bool = True

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in _VALID_LEVELS:
            raise ValueError(
                f"{ENV_PREFIX}LOG_LEVEL must be one of {list(_VALID_LEVELS)}, got '{self.level}'"
            )

    @property
    def level_no(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.level)


@dataclass
class IndicatorDefaults:
    """
    Default periods used by the indicator factory when a type string is
    created without an explicit period.

    The indicator classes themselves always default to the constants in
    constants.py; these values only affect create_incremental_indicator().
    """
    ema_period: int = DEFAULT_EMA_PERIOD
    dema_period: int = DEFAULT_DEMA_PERIOD
    trix_period: int = DEFAULT_TRIX_PERIOD

    def __post_init__(self):
        for name in ("ema_period", "dema_period", "trix_period"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(
                    f"{ENV_PREFIX}{name.upper()} must be a positive integer, got {value!r}"
                )

    def period_for(self, indicator_type: str) -> Optional[int]:
        """Default period for an indicator type, or None if it has no period."""
        return getattr(self, f"{indicator_type.lower()}_period", None)


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, naming it on failure."""
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(
            f"{ENV_PREFIX}{name} must be a positive integer, got '{raw}'"
        ) from None


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Later files override earlier ones
        for env_name in [".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=True)

        self.log = self._load_log_config()
        self.indicators = self._load_indicator_defaults()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING"),
            log_dir=os.getenv(f"{ENV_PREFIX}LOG_DIR") or None,
            colored=os.getenv(f"{ENV_PREFIX}LOG_COLOR", "true").lower() == "true",
        )

    def _load_indicator_defaults(self) -> IndicatorDefaults:
        """Load factory default periods from environment."""
        return IndicatorDefaults(
            ema_period=_env_int("EMA_PERIOD", DEFAULT_EMA_PERIOD),
            dema_period=_env_int("DEMA_PERIOD", DEFAULT_DEMA_PERIOD),
            trix_period=_env_int("TRIX_PERIOD", DEFAULT_TRIX_PERIOD),
        )

    def reload(self, env_file: str = ".env") -> 'Config':
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def summary(self) -> List[str]:
        """Human-readable configuration lines."""
        return [
            f"Log level:    {self.log.level}",
            f"Log dir:      {self.log.log_dir or '(console only)'}",
            f"Colored:      {self.log.colored}",
            f"EMA period:   {self.indicators.ema_period}",
            f"DEMA period:  {self.indicators.dema_period}",
            f"TRIX period:  {self.indicators.trix_period}",
        ]


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the global config instance so the next get_config() reloads."""
    Config._instance = None
