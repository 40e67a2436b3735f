"""Tests for conversion, selectivity and performance estimators."""

import pytest

from methanol_sim.metrics.estimators import (
    calculate_performance,
    estimate_conversion,
    estimate_selectivity,
    pressure_term,
)
from methanol_sim.profiles.library import BASELINE, REVISED


class _FixedRng:
    def __init__(self, value: float = 0.0):
        self.value = value

    def uniform(self, low, high):
        return max(low, min(high, self.value))


# ---------------------------------------------------------------------------
# Baseline profile
# ---------------------------------------------------------------------------


class TestBaselineConversion:
    def test_design_point(self):
        assert estimate_conversion(65.0, 230.0, 3.0, BASELINE) == 65.0

    def test_pressure_raises_conversion(self):
        assert estimate_conversion(80.0, 230.0, 3.0, BASELINE) == pytest.approx(74.0)

    def test_temperature_deviation_penalised_both_ways(self):
        hot = estimate_conversion(65.0, 240.0, 3.0, BASELINE)
        cold = estimate_conversion(65.0, 220.0, 3.0, BASELINE)
        assert hot == pytest.approx(57.0)
        assert cold == pytest.approx(hot)

    def test_ratio_deviation_penalised(self):
        assert estimate_conversion(65.0, 230.0, 3.2, BASELINE) == pytest.approx(60.0)

    def test_clamped_low(self):
        assert estimate_conversion(50.0, 200.0, 2.0, BASELINE) == 10.0

    def test_clamped_high(self):
        assert estimate_conversion(300.0, 230.0, 3.0, BASELINE) == 95.0

    def test_rng_ignored_without_noise(self):
        assert estimate_conversion(65.0, 230.0, 3.0, BASELINE, _FixedRng(0.4)) == 65.0


class TestBaselineSelectivity:
    def test_design_point(self):
        assert estimate_selectivity(230.0, 3.0, 65.0, BASELINE) == 90.0

    def test_pressure_has_no_effect(self):
        assert estimate_selectivity(230.0, 3.0, 50.0, BASELINE) == 90.0
        assert estimate_selectivity(230.0, 3.0, 80.0, BASELINE) == 90.0

    def test_penalties(self):
        assert estimate_selectivity(240.0, 3.1, 65.0, BASELINE) == pytest.approx(83.0)

    def test_clamped_low(self):
        assert estimate_selectivity(150.0, 2.0, 65.0, BASELINE) == 60.0


# ---------------------------------------------------------------------------
# Revised profile
# ---------------------------------------------------------------------------


class TestRevisedConversion:
    def test_optimum_band_beats_low_pressure(self):
        inside = estimate_conversion(85.0, 230.0, 3.0, REVISED)
        low = estimate_conversion(60.0, 230.0, 3.0, REVISED)
        assert inside > low

    def test_optimum_band_value(self):
        assert estimate_conversion(85.0, 230.0, 3.0, REVISED) == pytest.approx(96.0)

    def test_decay_above_band_gentler_than_below(self):
        above = estimate_conversion(100.0, 230.0, 3.0, REVISED)
        below = estimate_conversion(75.0, 230.0, 3.0, REVISED)
        assert above == pytest.approx(94.5)
        assert below == pytest.approx(93.5)
        assert above > below

    def test_floor_at_90(self):
        assert estimate_conversion(50.0, 200.0, 2.7, REVISED) == 90.0

    def test_ceiling_at_98(self):
        assert estimate_conversion(85.0, 230.0, 3.0, REVISED, _FixedRng(0.5)) <= 98.0

    def test_noise_is_symmetric_and_bounded(self):
        plus = estimate_conversion(85.0, 230.0, 3.0, REVISED, _FixedRng(10.0))
        minus = estimate_conversion(85.0, 230.0, 3.0, REVISED, _FixedRng(-10.0))
        assert plus == pytest.approx(96.5)
        assert minus == pytest.approx(95.5)


class TestRevisedSelectivity:
    def test_pressure_band_ordering(self):
        band = estimate_selectivity(230.0, 3.0, 80.0, REVISED)
        high = estimate_selectivity(230.0, 3.0, 95.0, REVISED)
        neutral = estimate_selectivity(230.0, 3.0, 70.0, REVISED)
        low = estimate_selectivity(230.0, 3.0, 60.0, REVISED)
        assert band == pytest.approx(94.0)
        assert high == pytest.approx(92.0)
        assert neutral == pytest.approx(90.0)
        assert low == pytest.approx(88.0)

    def test_band_edge_uses_first_match(self):
        assert estimate_selectivity(230.0, 3.0, 90.0, REVISED) == pytest.approx(94.0)

    def test_clamped_low(self):
        assert estimate_selectivity(200.0, 2.7, 50.0, REVISED) == 70.0


class TestPressureTerm:
    def test_no_bands_is_zero(self):
        assert pressure_term(BASELINE.selectivity, 80.0) == 0.0

    def test_gap_between_bands_is_zero(self):
        assert pressure_term(REVISED.selectivity, 70.0) == 0.0


# ---------------------------------------------------------------------------
# Performance
# ---------------------------------------------------------------------------


class TestPerformance:
    def test_product_of_fractions(self):
        assert calculate_performance(90.0, 80.0) == pytest.approx(72.0)

    def test_upper_bound(self):
        assert calculate_performance(100.0, 100.0) == pytest.approx(100.0)
        assert calculate_performance(120.0, 120.0) == 100.0

    def test_lower_bound(self):
        assert calculate_performance(0.0, 90.0) == 0.0
        assert calculate_performance(-10.0, 90.0) == 0.0
