"""
Configuration module.
"""

from .config import Config, IndicatorDefaults, LogConfig, get_config, reset_config

__all__ = ["Config", "IndicatorDefaults", "LogConfig", "get_config", "reset_config"]
