"""Conversion, selectivity and performance estimators.

All estimators are total functions: penalties are subtracted from a baseline
and the result is clamped into the formula's limits.
"""

from __future__ import annotations

from typing import Optional

from methanol_sim.models.constants import MetricFormula, PERFORMANCE_RANGE, ProcessProfile
from methanol_sim.models.random_walk import RandomSource


def pressure_term(formula: MetricFormula, pressure: float) -> float:
    """Contribution of the first pressure band containing ``pressure``."""
    for band in formula.pressure_bands:
        if band.applies(pressure):
            return band.value(pressure)
    return 0.0


def _evaluate(
    formula: MetricFormula,
    pressure: float,
    reactor_temp: float,
    ratio: float,
    rng: Optional[RandomSource] = None,
) -> float:
    value = formula.baseline
    value += pressure_term(formula, pressure)
    value -= abs(reactor_temp - formula.temp_setpoint) * formula.temp_weight
    value -= abs(ratio - formula.ratio_setpoint) * formula.ratio_weight
    if rng is not None and formula.noise > 0:
        value += float(rng.uniform(-formula.noise, formula.noise))
    return formula.limits.clamp(value)


def estimate_conversion(
    pressure: float,
    reactor_temp: float,
    ratio: float,
    profile: ProcessProfile,
    rng: Optional[RandomSource] = None,
) -> float:
    """CO2 single-pass conversion (%).

    Args:
        pressure: Loop pressure (bar).
        reactor_temp: Reactor temperature (deg C).
        ratio: H2/CO2 feed ratio.
        profile: Formula set to evaluate.
        rng: Source for the profile's measurement noise. Without one the
             estimate is noise-free.
    """
    return _evaluate(profile.conversion, pressure, reactor_temp, ratio, rng)


def estimate_selectivity(
    reactor_temp: float,
    ratio: float,
    pressure: float,
    profile: ProcessProfile,
) -> float:
    """Methanol selectivity (%). Pressure only matters on profiles with pressure bands."""
    return _evaluate(profile.selectivity, pressure, reactor_temp, ratio)


def calculate_performance(conversion: float, selectivity: float) -> float:
    """Overall performance index: product of conversion and selectivity fractions."""
    value = (conversion / 100.0) * (selectivity / 100.0) * 100.0
    return PERFORMANCE_RANGE.clamp(value)
