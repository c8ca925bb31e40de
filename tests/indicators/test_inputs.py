"""
Tests for the input capability model: protocols, Bar, close extraction.
"""

from collections import namedtuple
from dataclasses import asdict
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from tastream.indicators.incremental import (
    Bar,
    HasClose,
    HasHigh,
    HasHLCV,
    HasOpen,
    HasVolume,
    IncrementalDEMA,
    IncrementalVWAP,
    close_of,
)


class PropertyBar:
    """Caller-defined observation exposing fields as properties."""

    def __init__(self, high, low, close, volume):
        self._values = (high, low, close, volume)

    @property
    def high(self):
        return self._values[0]

    @property
    def low(self):
        return self._values[1]

    @property
    def close(self):
        return self._values[2]

    @property
    def volume(self):
        return self._values[3]


class CloseOnly:
    def __init__(self, close):
        self.close = close


class TestCapabilities:
    """Structural capability checks."""

    def test_bar_has_every_capability(self):
        bar = Bar(open=1.0, high=2.0, low=0.5, close=1.5, volume=10.0)
        for protocol in (HasOpen, HasHigh, HasClose, HasVolume, HasHLCV):
            assert isinstance(bar, protocol)

    def test_close_only_type_is_not_hlcv(self):
        obs = CloseOnly(3.0)
        assert isinstance(obs, HasClose)
        assert not isinstance(obs, HasHLCV)

    def test_property_based_type_is_hlcv(self):
        assert isinstance(PropertyBar(1.0, 1.0, 1.0, 1.0), HasHLCV)

    def test_bar_is_immutable(self):
        bar = Bar(close=1.0)
        with pytest.raises(AttributeError):
            bar.close = 2.0

    def test_bar_defaults_to_zero(self):
        assert Bar() == Bar(open=0.0, high=0.0, low=0.0, close=0.0, volume=0.0)


class TestCloseOf:
    """Scalar and structured inputs share one path."""

    def test_scalar(self):
        assert close_of(2.5) == 2.5

    def test_int_scalar_becomes_float(self):
        result = close_of(3)
        assert result == 3.0
        assert isinstance(result, float)

    def test_numpy_scalar(self):
        assert close_of(np.float64(4.25)) == 4.25

    def test_decimal_scalar(self):
        result = close_of(Decimal("2.5"))
        assert result == 2.5
        assert isinstance(result, float)

    def test_bar(self):
        assert close_of(Bar(close=7.0)) == 7.0

    def test_missing_close_raises_type_error(self):
        with pytest.raises(TypeError, match="close"):
            close_of(object())

    def test_nan_is_passed_through(self):
        assert np.isnan(close_of(float("nan")))


class TestCallerTypes:
    """Indicators accept any type that exposes the required fields."""

    def test_namedtuple_close(self):
        Tick = namedtuple("Tick", ["close"])
        dema = IncrementalDEMA(period=3)
        assert dema.next(Tick(2.0)) == 2.0
        assert dema.next(Tick(5.0)) == 4.25

    def test_property_bar_vwap(self):
        vwap = IncrementalVWAP()
        result = vwap.next(PropertyBar(1.3, 0.8, 1.1, 100.0))
        assert result == (1.3 + 0.8 + 1.1) / 3.0

    def test_dataframe_rows(self, vwap_bars):
        frame = pd.DataFrame([asdict(bar) for bar in vwap_bars])
        vwap = IncrementalVWAP()
        results = [vwap.next(row) for row in frame.itertuples(index=False)]
        assert results[-1] == pytest.approx(1.27, abs=1e-4)

    def test_vwap_rejects_scalar(self):
        vwap = IncrementalVWAP()
        with pytest.raises(TypeError, match="high"):
            vwap.next(1.0)

    def test_vwap_rejects_close_only(self):
        vwap = IncrementalVWAP()
        with pytest.raises(TypeError):
            vwap.next(CloseOnly(1.0))
