"""Hard-coded dashboard profiles.

Baseline is the first commissioning dashboard. Revised widens the
pressure envelope, tunes the estimators for near-saturation reporting and
adds the performance index.
"""

from __future__ import annotations

from typing import Optional

from methanol_sim.models.constants import (
    Bounds,
    MetricFormula,
    PressureBand,
    ProcessProfile,
    STEADY_STATE,
    StatusThresholds,
    WalkSpec,
)


_INF = float("inf")


BASELINE = ProcessProfile(
    name="Baseline",
    description="Commissioning dashboard. 50-80 bar loop, linear penalties.",
    initial_state=dict(STEADY_STATE),
    pressure=WalkSpec(step=1.5, bounds=Bounds(50.0, 80.0)),
    reactor_temp=WalkSpec(step=2.0, bounds=Bounds(200.0, 250.0)),
    ratio=WalkSpec(step=0.08, bounds=Bounds(2.7, 3.3), decimals=2),
    soec_temp=WalkSpec(step=8.0, bounds=Bounds(700.0, 900.0)),
    catalyst=WalkSpec(step=5.0, bounds=Bounds(650.0, 800.0), decimals=0),
    conversion=MetricFormula(
        baseline=65.0,
        temp_weight=0.8,
        ratio_weight=25.0,
        limits=Bounds(10.0, 95.0),
        # Linear pressure credit around the 65 bar design point
        pressure_bands=(PressureBand(-_INF, _INF, offset=0.0, slope=0.6, anchor=65.0),),
    ),
    selectivity=MetricFormula(
        baseline=90.0,
        temp_weight=0.5,
        ratio_weight=20.0,
        limits=Bounds(60.0, 98.0),
    ),
    thresholds=StatusThresholds(pressure_startup=55.0),
)


REVISED = ProcessProfile(
    name="Revised",
    description="High-pressure loop up to 100 bar with performance index.",
    initial_state={**STEADY_STATE, "pressure": 85.0},
    pressure=WalkSpec(step=1.5, bounds=Bounds(50.0, 100.0)),
    reactor_temp=WalkSpec(step=2.0, bounds=Bounds(200.0, 250.0)),
    ratio=WalkSpec(step=0.08, bounds=Bounds(2.7, 3.3), decimals=2),
    soec_temp=WalkSpec(step=8.0, bounds=Bounds(700.0, 900.0)),
    catalyst=WalkSpec(step=5.0, bounds=Bounds(650.0, 800.0), decimals=0),
    conversion=MetricFormula(
        baseline=90.0,
        temp_weight=0.3,
        ratio_weight=10.0,
        limits=Bounds(90.0, 98.0),
        pressure_bands=(
            PressureBand(80.0, 95.0, offset=6.0),
            # Gentle decay above the optimum band
            PressureBand(95.0, _INF, offset=6.0, slope=-0.3, anchor=95.0),
            # Steeper penalty below it
            PressureBand(-_INF, 80.0, offset=6.0, slope=0.5, anchor=80.0),
        ),
        noise=0.5,
    ),
    selectivity=MetricFormula(
        baseline=90.0,
        temp_weight=0.5,
        ratio_weight=20.0,
        limits=Bounds(70.0, 99.0),
        pressure_bands=(
            PressureBand(75.0, 90.0, offset=4.0),
            PressureBand(90.0, _INF, offset=2.0),
            # Reverse water-gas shift takes over at low pressure
            PressureBand(-_INF, 65.0, offset=0.0, slope=0.4, anchor=65.0),
        ),
    ),
    thresholds=StatusThresholds(pressure_startup=75.0),
    track_performance=True,
)


PROFILE_LIBRARY = [BASELINE, REVISED]


def get_profile(name: str) -> Optional[ProcessProfile]:
    """Look up a profile by name."""
    for p in PROFILE_LIBRARY:
        if p.name == name:
            return p
    return None
