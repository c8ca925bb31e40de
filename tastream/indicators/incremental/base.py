"""
Base class and shared types for incremental indicators.

All incremental indicators inherit from IncrementalIndicator, which defines
the O(1) per-observation interface: next(), reset(), value, is_ready.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from enum import Enum
from numbers import Integral
from typing import Any, ClassVar, Protocol, runtime_checkable


class InvalidParameterError(ValueError):
    """Raised when an indicator is constructed with an invalid configuration."""
    pass


class WarmupState(Enum):
    """
    Warm-up phase of an indicator.

    WARMING_UP until the first next() call completes, STEADY afterwards.
    Only reset() returns an indicator to WARMING_UP.
    """

    WARMING_UP = "warming_up"
    STEADY = "steady"


@runtime_checkable
class SupportsPeriod(Protocol):
    @property
    def period(self) -> int: ...


def validate_period(period: Any, indicator: str) -> int:
    """
    Validate a period parameter.

    Args:
        period: Candidate period
        indicator: Indicator abbreviation used in the error message

    Returns:
        The period as a plain int

    Raises:
        InvalidParameterError: If period is not a positive integer
    """
    # bool is an Integral; True is not a period
    if isinstance(period, bool) or not isinstance(period, Integral):
        raise InvalidParameterError(
            f"{indicator}: period must be a positive integer, got {period!r}"
        )
    if period <= 0:
        raise InvalidParameterError(
            f"{indicator}: period must be a positive integer, got {period}"
        )
    return int(period)


class IncrementalIndicator(ABC):
    """
    Base class for incremental indicators.

    Subclasses are dataclasses. Fields named in _config_fields are fixed
    once __post_init__ has called _freeze_config(); only internal state
    changes afterwards, and only through next() and reset().
    """

    abbreviation: ClassVar[str] = ""
    _config_fields: ClassVar[tuple[str, ...]] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._config_fields and self.__dict__.get("_config_frozen", False):
            raise AttributeError(
                f"{type(self).__name__}.{name} is fixed at construction"
            )
        super().__setattr__(name, value)

    def _freeze_config(self) -> None:
        object.__setattr__(self, "_config_frozen", True)

    def __copy__(self) -> IncrementalIndicator:
        # Owned sub-indicators are never shared between copies
        return copy.deepcopy(self)

    @abstractmethod
    def next(self, observation: Any) -> float:
        """Feed one observation and return the current indicator value."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset state to initial; configuration is kept."""
        ...

    @property
    @abstractmethod
    def value(self) -> float:
        """Last published value (0.0 before the first observation)."""
        ...

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True when warmup is complete."""
        ...

    def __str__(self) -> str:
        period = getattr(self, "period", None)
        if period is None:
            return self.abbreviation
        return f"{self.abbreviation}({period})"
