"""
Volume-based incremental indicators.

Includes VWAP, the cumulative volume-weighted average price.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from ...config.constants import VOLUME_EPSILON
from .base import IncrementalIndicator
from .inputs import HasHLCV, field_of

logger = logging.getLogger(__name__)


@dataclass
class IncrementalVWAP(IncrementalIndicator):
    """
    Volume Weighted Average Price with O(1) updates.

    Formula:
        typical_price = (high + low + close) / 3
        vwap = cumsum(typical_price * volume) / cumsum(volume)

    Cumulative since construction or the last reset(); there is no
    period and no session anchoring. Requires high, low, close and volume
    on every observation (scalars are rejected with TypeError).

    While the accumulated volume magnitude is below VOLUME_EPSILON the
    raw accumulated price-volume sum is published instead of the ratio.
    """

    abbreviation: ClassVar[str] = "VWAP"

    _cum_tp_vol: float = field(default=0.0, init=False)
    _cum_vol: float = field(default=0.0, init=False)
    _current: float = field(default=0.0, init=False)
    _count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        logger.debug("Created %s", self)

    def next(self, observation: HasHLCV) -> float:
        """Update with an observation exposing high, low, close and volume."""
        high = float(field_of(observation, "high"))
        low = float(field_of(observation, "low"))
        close = float(field_of(observation, "close"))
        volume = float(field_of(observation, "volume"))

        tp = (high + low + close) / 3.0
        self._cum_tp_vol += tp * volume
        self._cum_vol += volume
        self._count += 1

        if abs(self._cum_vol) < VOLUME_EPSILON:
            self._current = self._cum_tp_vol
        else:
            self._current = self._cum_tp_vol / self._cum_vol

        return self._current

    def reset(self) -> None:
        """Reset VWAP (call at session boundaries)."""
        self._cum_tp_vol = 0.0
        self._cum_vol = 0.0
        self._current = 0.0
        self._count = 0

    @property
    def value(self) -> float:
        return self._current

    @property
    def cumulative_price_volume(self) -> float:
        """Accumulated typical-price * volume."""
        return self._cum_tp_vol

    @property
    def cumulative_volume(self) -> float:
        """Accumulated volume."""
        return self._cum_vol

    @property
    def is_ready(self) -> bool:
        return self._count >= 1
