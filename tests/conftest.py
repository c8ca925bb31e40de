"""
Pytest configuration for indicator tests.
"""

import logging

import pytest

from tastream.config import reset_config
from tastream.indicators.incremental import Bar
from tastream.utils.logger import LOGGER_NAME

_ENV_VARS = (
    "TASTREAM_LOG_LEVEL",
    "TASTREAM_LOG_DIR",
    "TASTREAM_LOG_COLOR",
    "TASTREAM_EMA_PERIOD",
    "TASTREAM_DEMA_PERIOD",
    "TASTREAM_TRIX_PERIOD",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Empty TASTREAM_* environment, no .env in cwd, fresh config singleton."""
    for name in _ENV_VARS:
        # setenv first so teardown also removes values load_dotenv() writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield tmp_path
    reset_config()


@pytest.fixture
def library_logger():
    """The "tastream" logger, restored to its import-time state afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


@pytest.fixture
def vwap_bars() -> list[Bar]:
    """Three bars whose running VWAP ends near 1.27."""
    return [
        Bar(high=1.3, low=0.8, close=1.1, volume=100.0),
        Bar(high=1.4, low=1.0, close=1.3, volume=250.0),
        Bar(high=1.6, low=1.3, close=1.5, volume=150.0),
    ]


@pytest.fixture
def closes() -> list[float]:
    """Short close series with a sharp dip."""
    return [16.0, 17.0, 17.0, 10.0, 17.0, 18.0, 17.0, 17.0, 17.0]
