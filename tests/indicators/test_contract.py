"""
Behaviour every incremental indicator shares: default construction,
determinism, reset, labels and fixed configuration.
"""

import copy

import pytest

from tastream.indicators.incremental import (
    Bar,
    IncrementalDEMA,
    IncrementalEMA,
    IncrementalIndicator,
    IncrementalTRIX,
    IncrementalVWAP,
    InvalidParameterError,
    SupportsPeriod,
)

PERIOD_INDICATORS = [IncrementalEMA, IncrementalDEMA, IncrementalTRIX]
ALL_INDICATORS = PERIOD_INDICATORS + [IncrementalVWAP]

BARS = [
    Bar(open=10.0, high=10.5, low=9.5, close=10.2, volume=1200.0),
    Bar(open=10.2, high=11.0, low=10.1, close=10.9, volume=900.0),
    Bar(open=10.9, high=11.2, low=10.4, close=10.5, volume=1500.0),
    Bar(open=10.5, high=10.6, low=9.8, close=9.9, volume=2100.0),
    Bar(open=9.9, high=10.3, low=9.7, close=10.1, volume=800.0),
]


@pytest.mark.parametrize("cls", ALL_INDICATORS)
class TestAllIndicators:

    def test_default_constructible(self, cls):
        indicator = cls()
        assert isinstance(indicator, IncrementalIndicator)
        assert indicator.value == 0.0
        assert not indicator.is_ready

    def test_accepts_bars(self, cls):
        indicator = cls()
        for bar in BARS:
            assert isinstance(indicator.next(bar), float)
        assert indicator.is_ready

    def test_value_is_last_output(self, cls):
        indicator = cls()
        for bar in BARS:
            result = indicator.next(bar)
            assert indicator.value == result

    def test_deterministic(self, cls):
        a, b = cls(), cls()
        assert [a.next(bar) for bar in BARS] == [b.next(bar) for bar in BARS]

    def test_reset_reproduces_outputs(self, cls):
        indicator = cls()
        first_run = [indicator.next(bar) for bar in BARS]
        indicator.reset()
        assert [indicator.next(bar) for bar in BARS] == first_run

    def test_reset_restores_initial_state(self, cls):
        indicator = cls()
        for bar in BARS:
            indicator.next(bar)
        indicator.reset()
        assert indicator == cls()

    def test_reset_is_idempotent(self, cls):
        indicator = cls()
        indicator.reset()
        indicator.reset()
        assert indicator == cls()

    def test_label(self, cls):
        label = str(cls())
        assert label.startswith(cls.abbreviation)

    def test_copy_advances_independently(self, cls):
        """Advancing a shallow copy leaves the original untouched."""
        original, twin = cls(), cls()
        original.next(BARS[0])
        twin.next(BARS[0])

        clone = copy.copy(original)
        for bar in BARS[1:]:
            clone.next(bar)

        assert original == twin
        assert [original.next(bar) for bar in BARS[1:]] == [
            twin.next(bar) for bar in BARS[1:]
        ]

    def test_deepcopy_advances_independently(self, cls):
        original = cls()
        original.next(BARS[0])
        clone = copy.deepcopy(original)
        expected = clone.next(BARS[1])
        assert original.next(BARS[1]) == expected


@pytest.mark.parametrize("cls", PERIOD_INDICATORS)
class TestPeriodIndicators:

    def test_period_zero_fails(self, cls):
        with pytest.raises(InvalidParameterError):
            cls(period=0)

    def test_period_one_succeeds(self, cls):
        assert cls(period=1).period == 1

    def test_supports_period(self, cls):
        assert isinstance(cls(period=4), SupportsPeriod)

    def test_label_has_period(self, cls):
        assert str(cls(period=14)) == f"{cls.abbreviation}(14)"

    def test_period_is_fixed(self, cls):
        indicator = cls(period=4)
        with pytest.raises(AttributeError, match="fixed"):
            indicator.period = 8
        assert indicator.period == 4

    def test_scalar_and_bar_agree(self, cls):
        by_scalar, by_bar = cls(period=3), cls(period=3)
        for bar in BARS:
            assert by_scalar.next(bar.close) == by_bar.next(bar)
