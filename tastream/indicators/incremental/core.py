"""
Core incremental indicator: the exponential moving average.

IncrementalEMA is the primitive every EMA-composable indicator is built
from (see ema_composable.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from ...config.constants import DEFAULT_EMA_PERIOD
from .base import IncrementalIndicator, WarmupState, validate_period
from .inputs import CloseInput, close_of

logger = logging.getLogger(__name__)


@dataclass
class IncrementalEMA(IncrementalIndicator):
    """
    Exponential Moving Average with O(1) updates.

    Formula:
        alpha = 2 / (period + 1)
        ema = alpha * close + (1 - alpha) * ema_prev

    The first observation seeds the average directly (ema = close), so
    the first output always equals the first input. Inner layers of
    composite indicators rely on this seeding rule.

    Example:
        >>> ema = IncrementalEMA(period=3)
        >>> ema.next(2.0), ema.next(5.0)
        (2.0, 3.5)
    """

    abbreviation: ClassVar[str] = "EMA"
    _config_fields: ClassVar[tuple[str, ...]] = ("period",)

    period: int = DEFAULT_EMA_PERIOD
    _alpha: float = field(init=False, repr=False)
    _current: float = field(default=0.0, init=False)
    _state: WarmupState = field(default=WarmupState.WARMING_UP, init=False)

    def __post_init__(self) -> None:
        self.period = validate_period(self.period, self.abbreviation)
        self._alpha = 2.0 / (self.period + 1)
        self._freeze_config()
        logger.debug("Created %s (alpha=%s)", self, self._alpha)

    def next(self, observation: CloseInput) -> float:
        """Update with a close price or close-capable bar."""
        close = close_of(observation)

        if self._state is WarmupState.WARMING_UP:
            self._current = close
            self._state = WarmupState.STEADY
        else:
            self._current = self._alpha * close + (1.0 - self._alpha) * self._current

        return self._current

    def reset(self) -> None:
        self._current = 0.0
        self._state = WarmupState.WARMING_UP

    @property
    def alpha(self) -> float:
        """Smoothing coefficient."""
        return self._alpha

    @property
    def value(self) -> float:
        return self._current

    @property
    def is_ready(self) -> bool:
        return self._state is WarmupState.STEADY
