"""Bounded random-walk drift of the primary process variables.

Each primary moves by a uniform jitter and is clamped back into its window.
Reactor temperature follows a window set by pressure and SOEC temperature
a window set by the H2/CO2 ratio, so the update order matters:

    pressure -> reactor_temp -> ratio (+ correction) -> soec_temp -> catalyst
"""

from __future__ import annotations

from typing import Protocol

from methanol_sim.models.constants import (
    Bounds,
    ProcessProfile,
    REACTOR_TEMP_RANGE,
    SOEC_TEMP_RANGE,
    WalkSpec,
)
from methanol_sim.models.process_state import ProcessState


class RandomSource(Protocol):
    """Anything with ``uniform(low, high)``: numpy Generator, random.Random, ..."""

    def uniform(self, low: float, high: float) -> float:
        ...


def smooth_random(
    current: float,
    step: float,
    lo: float,
    hi: float,
    rng: RandomSource,
    decimals: int = 1,
) -> float:
    """Perturb ``current`` by U(-step, step), clamp to [lo, hi] and round."""
    delta = float(rng.uniform(-step, step)) if step > 0 else 0.0
    nxt = max(lo, min(hi, current + delta))
    return round(nxt, decimals)


def _walk(current: float, spec: WalkSpec, window: Bounds, rng: RandomSource) -> float:
    return smooth_random(current, spec.step, window.lo, window.hi, rng, spec.decimals)


def reactor_temp_window(pressure: float, profile: ProcessProfile) -> Bounds:
    """Reactor temperature window, 10 C wide, rising 0.8 C per bar."""
    return profile.reactor_coupling.window(pressure, REACTOR_TEMP_RANGE)


def soec_temp_window(ratio: float, profile: ProcessProfile) -> Bounds:
    """SOEC temperature window; more hydrogen demand runs the stack hotter."""
    return profile.soec_coupling.window(ratio, SOEC_TEMP_RANGE)


def correct_ratio(ratio: float, profile: ProcessProfile) -> float:
    """Nudge the ratio toward the optimum band without clamping to it."""
    target = profile.ratio_target
    if ratio < target.lo:
        ratio += profile.ratio_correction
    if ratio > target.hi:
        ratio -= profile.ratio_correction
    return round(ratio, profile.ratio.decimals)


def update_primaries(
    state: ProcessState, profile: ProcessProfile, rng: RandomSource
) -> ProcessState:
    """Advance the five primary variables by one tick.

    Derived metrics and status are carried over unchanged.
    """
    pressure = _walk(state.pressure, profile.pressure, profile.pressure.bounds, rng)

    reactor_temp = _walk(
        state.reactor_temp,
        profile.reactor_temp,
        reactor_temp_window(pressure, profile),
        rng,
    )

    ratio = _walk(state.ratio, profile.ratio, profile.ratio.bounds, rng)
    ratio = correct_ratio(ratio, profile)

    soec_temp = _walk(
        state.soec_temp,
        profile.soec_temp,
        soec_temp_window(ratio, profile),
        rng,
    )

    catalyst = _walk(state.catalyst, profile.catalyst, profile.catalyst.bounds, rng)

    return state.with_updates(
        pressure=pressure,
        reactor_temp=reactor_temp,
        soec_temp=soec_temp,
        ratio=ratio,
        catalyst=catalyst,
    )
