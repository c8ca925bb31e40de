"""
EMA-composable indicators built on top of IncrementalEMA.

Includes DEMA and TRIX, both of which chain several IncrementalEMA
instances of the same period. Chain order is fixed: each EMA layer only
ever sees the output of the layer before it, and the first layer sees
the raw close.

Every inner EMA seeds from its first input (see IncrementalEMA), and the
composite keeps its own WarmupState on top of its children's, so the
first composite output is a seed value rather than a blended one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from ...config.constants import DEFAULT_DEMA_PERIOD, DEFAULT_TRIX_PERIOD, PERCENT
from .base import IncrementalIndicator, WarmupState, validate_period
from .core import IncrementalEMA
from .inputs import CloseInput, close_of

logger = logging.getLogger(__name__)


@dataclass
class IncrementalDEMA(IncrementalIndicator):
    """
    Double Exponential Moving Average with O(1) updates.

    Formula:
        ema1 = ema(close)
        ema2 = ema(ema1)
        dema = 2 * ema1 - ema2

    On the first observation the published value is ema2 itself (which
    equals the close, since both layers seed from it).

    Example:
        >>> dema = IncrementalDEMA(period=3)
        >>> [dema.next(x) for x in (2.0, 5.0, 1.0, 6.25)]
        [2.0, 4.25, 2.0, 5.125]
    """

    abbreviation: ClassVar[str] = "DEMA"
    _config_fields: ClassVar[tuple[str, ...]] = ("period",)

    period: int = DEFAULT_DEMA_PERIOD
    _ema1: IncrementalEMA = field(init=False, repr=False)
    _ema2: IncrementalEMA = field(init=False, repr=False)
    _current: float = field(default=0.0, init=False)
    _state: WarmupState = field(default=WarmupState.WARMING_UP, init=False)

    def __post_init__(self) -> None:
        self.period = validate_period(self.period, self.abbreviation)
        self._ema1 = IncrementalEMA(period=self.period)
        self._ema2 = IncrementalEMA(period=self.period)
        self._freeze_config()
        logger.debug("Created %s", self)

    def next(self, observation: CloseInput) -> float:
        """Update with a close price or close-capable bar."""
        ema1 = self._ema1.next(close_of(observation))
        ema2 = self._ema2.next(ema1)

        if self._state is WarmupState.WARMING_UP:
            self._current = ema2
            self._state = WarmupState.STEADY
        else:
            self._current = 2.0 * ema1 - ema2

        return self._current

    def reset(self) -> None:
        self._current = 0.0
        self._state = WarmupState.WARMING_UP
        self._ema1.reset()
        self._ema2.reset()

    @property
    def value(self) -> float:
        return self._current

    @property
    def is_ready(self) -> bool:
        return self._state is WarmupState.STEADY


@dataclass
class IncrementalTRIX(IncrementalIndicator):
    """
    TRIX (Triple Exponential Average Rate of Change) with O(1) updates.

    Formula:
        ema1 = ema(close)
        ema2 = ema(ema1)
        ema3 = ema(ema2)
        trix = ((ema3 - ema3_prev) / ema3_prev) * 100

    The first observation only records ema3 as the baseline and publishes
    0.0 (no prior value to compare against).

    A baseline of exactly zero is not guarded: the division follows
    IEEE-754 and yields +/-inf or nan instead of raising.
    """

    abbreviation: ClassVar[str] = "TRIX"
    _config_fields: ClassVar[tuple[str, ...]] = ("period",)

    period: int = DEFAULT_TRIX_PERIOD
    _ema1: IncrementalEMA = field(init=False, repr=False)
    _ema2: IncrementalEMA = field(init=False, repr=False)
    _ema3: IncrementalEMA = field(init=False, repr=False)
    _prev_ema3: float = field(default=0.0, init=False)
    _trix_value: float = field(default=0.0, init=False)
    _state: WarmupState = field(default=WarmupState.WARMING_UP, init=False)

    def __post_init__(self) -> None:
        self.period = validate_period(self.period, self.abbreviation)
        self._ema1 = IncrementalEMA(period=self.period)
        self._ema2 = IncrementalEMA(period=self.period)
        self._ema3 = IncrementalEMA(period=self.period)
        self._freeze_config()
        logger.debug("Created %s", self)

    def next(self, observation: CloseInput) -> float:
        """Update with a close price or close-capable bar."""
        ema1 = self._ema1.next(close_of(observation))
        ema2 = self._ema2.next(ema1)
        ema3 = self._ema3.next(ema2)

        if self._state is WarmupState.WARMING_UP:
            self._trix_value = 0.0
            self._state = WarmupState.STEADY
        else:
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                prev = np.float64(self._prev_ema3)
                trix = ((np.float64(ema3) - prev) / prev) * PERCENT
            self._trix_value = float(trix)

        self._prev_ema3 = ema3
        return self._trix_value

    def reset(self) -> None:
        self._prev_ema3 = 0.0
        self._trix_value = 0.0
        self._state = WarmupState.WARMING_UP
        self._ema1.reset()
        self._ema2.reset()
        self._ema3.reset()

    @property
    def value(self) -> float:
        """Returns TRIX value."""
        return self._trix_value

    @property
    def baseline(self) -> float:
        """Triple-smoothed value the next observation is compared against."""
        return self._prev_ema3

    @property
    def is_ready(self) -> bool:
        return self._state is WarmupState.STEADY
