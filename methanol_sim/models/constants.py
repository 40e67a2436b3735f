"""Operating ranges, formula weights, and status thresholds for the methanol loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Bounds:
    """Closed interval [lo, hi]."""

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if self.lo > self.hi:
            raise ValueError(f"Invalid bounds: lo={self.lo} > hi={self.hi}")

    def clamp(self, value: float) -> float:
        return max(self.lo, min(self.hi, value))

    def contains(self, value: float) -> bool:
        return self.lo <= value <= self.hi


@dataclass(frozen=True)
class WalkSpec:
    """Random-walk parameters for one primary variable."""

    step: float
    bounds: Bounds
    decimals: int = 1


@dataclass(frozen=True)
class PressureBand:
    """Piecewise pressure term: offset + slope * (P - anchor) for lo <= P <= hi."""

    lo: float
    hi: float
    offset: float
    slope: float = 0.0
    anchor: float = 0.0

    def __post_init__(self) -> None:
        if self.lo > self.hi:
            raise ValueError(f"Invalid pressure band: lo={self.lo} > hi={self.hi}")

    def applies(self, pressure: float) -> bool:
        return self.lo <= pressure <= self.hi

    def value(self, pressure: float) -> float:
        return self.offset + self.slope * (pressure - self.anchor)


@dataclass(frozen=True)
class MetricFormula:
    """Baseline-minus-penalties estimator.

    The estimate is ``baseline + band(P) - temp_weight * |T - temp_setpoint|
    - ratio_weight * |ratio - ratio_setpoint| + noise`` clamped to ``limits``.
    Only the first pressure band containing P contributes.
    """

    baseline: float
    temp_weight: float
    ratio_weight: float
    limits: Bounds
    temp_setpoint: float = 230.0
    ratio_setpoint: float = 3.0
    pressure_bands: Tuple[PressureBand, ...] = ()
    noise: float = 0.0


@dataclass(frozen=True)
class StatusThresholds:
    """Ordered status decision thresholds."""

    # STARTUP
    pressure_startup: float = 55.0
    reactor_temp_startup: float = 210.0
    soec_temp_startup: float = 720.0

    # CRITICAL
    reactor_temp_critical: float = 245.0
    soec_temp_critical: float = 880.0
    ratio_critical: Bounds = Bounds(2.7, 3.3)

    # WARNING
    ratio_warning: Bounds = Bounds(2.8, 3.2)


@dataclass(frozen=True)
class Coupling:
    """Target temperature = base + gain * (driver - reference), +/- half_width."""

    base: float
    gain: float
    reference: float
    half_width: float

    def window(self, driver: float, hard: Bounds) -> Bounds:
        target = self.base + self.gain * (driver - self.reference)
        lo = hard.clamp(target - self.half_width)
        hi = hard.clamp(target + self.half_width)
        return Bounds(lo, hi)


@dataclass(frozen=True)
class ProcessProfile:
    """Complete formula set for one dashboard variant."""

    name: str
    description: str
    initial_state: Dict[str, float]
    pressure: WalkSpec
    reactor_temp: WalkSpec
    ratio: WalkSpec
    soec_temp: WalkSpec
    catalyst: WalkSpec
    conversion: MetricFormula
    selectivity: MetricFormula
    thresholds: StatusThresholds = field(default_factory=StatusThresholds)
    reactor_coupling: Coupling = Coupling(base=210.0, gain=0.8, reference=50.0, half_width=5.0)
    soec_coupling: Coupling = Coupling(base=750.0, gain=200.0, reference=2.8, half_width=20.0)
    ratio_target: Bounds = Bounds(2.8, 3.2)
    ratio_correction: float = 0.05
    track_performance: bool = False


# Hard physical ranges the coupling windows are intersected with
REACTOR_TEMP_RANGE = Bounds(200.0, 250.0)
SOEC_TEMP_RANGE = Bounds(700.0, 900.0)
PERFORMANCE_RANGE = Bounds(0.0, 100.0)


# Nominal steady-state operating point
STEADY_STATE = {
    "pressure": 65.0,       # Synthesis loop pressure (bar)
    "reactor_temp": 230.0,  # Methanol reactor temperature (deg C)
    "soec_temp": 800.0,     # SOEC stack temperature (deg C)
    "ratio": 3.0,           # H2/CO2 feed ratio (mol/mol)
    "catalyst": 720.0,      # Catalyst loading (kg)
}


TICK_INTERVAL_MS = 2000


@dataclass(frozen=True)
class DisplayRange:
    """Bar scale and optional highlighted optimum for the dashboard."""

    label: str
    unit: str
    bounds: Bounds
    optimum: Optional[Bounds] = None
    decimals: int = 1


DISPLAY_RANGES = {
    "pressure": DisplayRange("Pressure", "bar", Bounds(50.0, 80.0)),
    "reactor_temp": DisplayRange("Reactor Temperature", "C", Bounds(200.0, 250.0)),
    "soec_temp": DisplayRange("SOEC Temperature", "C", Bounds(700.0, 900.0)),
    "ratio": DisplayRange("H2/CO2 Ratio", "", Bounds(2.6, 3.4), Bounds(2.8, 3.2), decimals=2),
    "catalyst": DisplayRange(
        "Catalyst Loading", "kg", Bounds(600.0, 1800.0), Bounds(700.0, 750.0), decimals=0
    ),
}
