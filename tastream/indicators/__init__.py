"""
Indicator Module: streaming technical indicator primitives.

Components:
- incremental.inputs: capability protocols (HasClose, HasHLCV, ...) and Bar
- incremental.base: IncrementalIndicator contract, WarmupState, errors
- incremental.core: IncrementalEMA, the leaf smoother
- incremental.ema_composable: DEMA and TRIX built from chained EMAs
- incremental.volume: cumulative VWAP
- incremental.factory: create indicators from a type string and params

Usage:
    from tastream.indicators import create_incremental_indicator

    trix = create_incremental_indicator("trix", {"period": 15})
    for close in closes:
        rate = trix.next(close)
"""

from .incremental import (
    Bar,
    IncrementalDEMA,
    IncrementalEMA,
    IncrementalIndicator,
    IncrementalTRIX,
    IncrementalVWAP,
    InvalidParameterError,
    create_incremental_indicator,
    list_incremental_indicators,
    supports_incremental,
)

__all__ = [
    "Bar",
    "IncrementalIndicator",
    "IncrementalEMA",
    "IncrementalDEMA",
    "IncrementalTRIX",
    "IncrementalVWAP",
    "InvalidParameterError",
    "create_incremental_indicator",
    "list_incremental_indicators",
    "supports_incremental",
]
