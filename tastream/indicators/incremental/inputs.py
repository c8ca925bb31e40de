"""
Input capabilities for incremental indicators.

An indicator never depends on a concrete bar class. It depends on the
fields it reads, each described by a small Protocol:

    HasOpen, HasHigh, HasLow, HasClose, HasVolume

Any object exposing those attributes (a Bar, a namedtuple, a row from
DataFrame.itertuples(), a class with properties) can be fed to an
indicator that needs them. A bare real number counts as "has close", so
close-only indicators take scalars and bars through the same path.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class HasOpen(Protocol):
    @property
    def open(self) -> float: ...


@runtime_checkable
class HasHigh(Protocol):
    @property
    def high(self) -> float: ...


@runtime_checkable
class HasLow(Protocol):
    @property
    def low(self) -> float: ...


@runtime_checkable
class HasClose(Protocol):
    @property
    def close(self) -> float: ...


@runtime_checkable
class HasVolume(Protocol):
    @property
    def volume(self) -> float: ...


@runtime_checkable
class HasHLCV(HasHigh, HasLow, HasClose, HasVolume, Protocol):
    """High, low, close and volume together (volume-weighted indicators)."""


# Input accepted by close-only indicators.
CloseInput = Union[float, HasClose]


@dataclass(frozen=True)
class Bar:
    """
    One OHLCV observation.

    Fields default to 0.0 so tests and callers only spell out the fields
    an indicator reads, e.g. Bar(close=2.0). No range checks are applied:
    non-finite values are passed through to the indicators unchanged.
    """

    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0


def close_of(observation: CloseInput) -> float:
    """
    Extract the close price from a scalar or a close-capable observation.

    Scalars are real numbers (int, float, numpy scalars) and Decimal.

    Raises:
        TypeError: If observation is neither a real number nor has .close
    """
    if isinstance(observation, (Real, Decimal)):
        return float(observation)
    return float(field_of(observation, "close"))


def field_of(observation: object, name: str) -> float:
    """
    Read one capability field from an observation.

    Raises:
        TypeError: If the observation does not expose the field
    """
    try:
        return getattr(observation, name)
    except AttributeError:
        raise TypeError(
            f"{type(observation).__name__} has no '{name}' field"
        ) from None
