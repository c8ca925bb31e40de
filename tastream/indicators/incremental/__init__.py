"""
Incremental indicator computation.

O(1) per-observation updates, no stored history. Every indicator takes
either a bare price or any object exposing the fields it reads.

Usage:
    from tastream.indicators.incremental import Bar, IncrementalDEMA, IncrementalVWAP

    dema = IncrementalDEMA(period=14)
    for price in closes:
        current = dema.next(price)

    vwap = IncrementalVWAP()
    current = vwap.next(Bar(high=1.3, low=0.8, close=1.1, volume=100.0))
"""

from __future__ import annotations

# Base types
from .base import (
    IncrementalIndicator,
    InvalidParameterError,
    SupportsPeriod,
    WarmupState,
    validate_period,
)

# Input capabilities
from .inputs import (
    Bar,
    CloseInput,
    HasClose,
    HasHigh,
    HasHLCV,
    HasLow,
    HasOpen,
    HasVolume,
    close_of,
)

# Core indicators
from .core import IncrementalEMA

# EMA-composable indicators
from .ema_composable import IncrementalDEMA, IncrementalTRIX

# Volume indicators
from .volume import IncrementalVWAP

# Factory and utilities
from .factory import (
    INCREMENTAL_INDICATORS,
    create_incremental_indicator,
    list_incremental_indicators,
    supports_incremental,
)

__all__ = [
    # Base
    "IncrementalIndicator",
    "InvalidParameterError",
    "SupportsPeriod",
    "WarmupState",
    "validate_period",
    # Inputs
    "Bar",
    "CloseInput",
    "HasClose",
    "HasHigh",
    "HasHLCV",
    "HasLow",
    "HasOpen",
    "HasVolume",
    "close_of",
    # Core
    "IncrementalEMA",
    # EMA-composable
    "IncrementalDEMA",
    "IncrementalTRIX",
    # Volume
    "IncrementalVWAP",
    # Factory and utilities
    "create_incremental_indicator",
    "supports_incremental",
    "list_incremental_indicators",
    "INCREMENTAL_INDICATORS",
]
