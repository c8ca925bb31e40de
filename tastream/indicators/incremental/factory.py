"""
Factory function and registry for incremental indicators.

Provides create_incremental_indicator() to instantiate any incremental
indicator from a type string and parameter dict, plus registry query functions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ...config import get_config
from .base import IncrementalIndicator
from .core import IncrementalEMA
from .ema_composable import IncrementalDEMA, IncrementalTRIX
from .volume import IncrementalVWAP

logger = logging.getLogger(__name__)


INCREMENTAL_INDICATORS: dict[str, type[IncrementalIndicator]] = {
    "ema": IncrementalEMA,
    "dema": IncrementalDEMA,
    "trix": IncrementalTRIX,
    "vwap": IncrementalVWAP,
}


_VALID_PARAMS: dict[str, frozenset[str]] = {
    "ema": frozenset({"period"}),
    "dema": frozenset({"period"}),
    "trix": frozenset({"period"}),
    "vwap": frozenset(),
}


def _validate_params(indicator_type: str, params: dict[str, Any]) -> None:
    """Raise ValueError if params contains unknown keys for this indicator."""
    valid = _VALID_PARAMS.get(indicator_type)
    if valid is None:
        return
    unknown = set(params.keys()) - valid
    if unknown:
        raise ValueError(
            f"Unknown params for '{indicator_type}': {sorted(unknown)}. "
            f"Valid: {sorted(valid)}"
        )


def _default_period(indicator_type: str) -> int:
    """Factory default period, taken from environment configuration."""
    return get_config().indicators.period_for(indicator_type)


# Each entry maps indicator type string to a callable(params) -> IncrementalIndicator.
_FACTORY: dict[str, Callable[[dict[str, Any]], IncrementalIndicator]] = {
    "ema": lambda p: IncrementalEMA(period=p.get("period", _default_period("ema"))),
    "dema": lambda p: IncrementalDEMA(period=p.get("period", _default_period("dema"))),
    "trix": lambda p: IncrementalTRIX(period=p.get("period", _default_period("trix"))),
    "vwap": lambda _: IncrementalVWAP(),
}


def create_incremental_indicator(
    indicator_type: str,
    params: dict[str, Any] | None = None,
) -> IncrementalIndicator | None:
    """
    Create an incremental indicator from type and params.

    Returns None if the indicator type is not supported incrementally.
    Raises ValueError if params contains unknown keys, and
    InvalidParameterError (a ValueError) if a period is invalid.
    """
    indicator_type = indicator_type.lower()
    params = params or {}
    _validate_params(indicator_type, params)

    factory_fn = _FACTORY.get(indicator_type)
    if factory_fn is None:
        logger.debug("No incremental implementation for '%s'", indicator_type)
        return None
    return factory_fn(params)


def supports_incremental(indicator_type: str) -> bool:
    """Check if indicator type supports incremental computation."""
    return indicator_type.lower() in INCREMENTAL_INDICATORS


def list_incremental_indicators() -> list[str]:
    """Get sorted list of all indicators that support incremental computation."""
    return sorted(INCREMENTAL_INDICATORS)
