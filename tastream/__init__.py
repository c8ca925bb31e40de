"""
tastream - Streaming technical indicators

Incremental technical-analysis indicators that update one observation at
a time without storing history. Indicators accept a bare price or any
object exposing the OHLCV fields they read.
"""

__version__ = "1.0.0"
__author__ = "tastream"

from .config import get_config
from .indicators.incremental import (
    Bar,
    IncrementalDEMA,
    IncrementalEMA,
    IncrementalTRIX,
    IncrementalVWAP,
    InvalidParameterError,
    create_incremental_indicator,
)
from .utils.logger import get_logger, setup_logger

__all__ = [
    "__version__",
    "get_config",
    "get_logger",
    "setup_logger",
    "Bar",
    "IncrementalEMA",
    "IncrementalDEMA",
    "IncrementalTRIX",
    "IncrementalVWAP",
    "InvalidParameterError",
    "create_incremental_indicator",
]
