"""One-tick process update and the simulator that owns the live state.

``tick`` is pure: it takes a snapshot, a profile and a random source and
returns the next snapshot. ``ProcessSimulator`` is the single owner of the
current state and follows a two-phase pattern: step() computes a tentative
state, commit() applies it.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from methanol_sim.logger import get_logger
from methanol_sim.metrics.estimators import (
    calculate_performance,
    estimate_conversion,
    estimate_selectivity,
)
from methanol_sim.models.constants import ProcessProfile
from methanol_sim.models.process_state import ProcessState, Status
from methanol_sim.models.random_walk import RandomSource, update_primaries
from methanol_sim.profiles.library import BASELINE, get_profile
from methanol_sim.status.classifier import classify_status, status_reasons


def derive_metrics(
    state: ProcessState,
    profile: ProcessProfile,
    rng: Optional[RandomSource] = None,
) -> ProcessState:
    """Recompute conversion, selectivity and status from the primaries.

    Performance is left untouched; it lags one tick behind and is only
    updated by ``tick``.
    """
    conversion = estimate_conversion(
        state.pressure, state.reactor_temp, state.ratio, profile, rng
    )
    selectivity = estimate_selectivity(
        state.reactor_temp, state.ratio, state.pressure, profile
    )
    updated = state.with_updates(conversion=conversion, selectivity=selectivity)
    return updated.with_updates(status=classify_status(updated, profile))


def initial_state(profile: ProcessProfile) -> ProcessState:
    """Profile start-up snapshot with noise-free derived metrics."""
    state = ProcessState.from_dict(profile.initial_state)
    state = derive_metrics(state, profile)
    if profile.track_performance:
        state = state.with_updates(
            performance=calculate_performance(state.conversion, state.selectivity)
        )
    return state


def tick(state: ProcessState, profile: ProcessProfile, rng: RandomSource) -> ProcessState:
    """Advance the process by one timer period."""
    performance = None
    if profile.track_performance:
        # Read before overwrite: uses the previous tick's metrics
        performance = calculate_performance(state.conversion, state.selectivity)

    nxt = update_primaries(state, profile, rng)
    nxt = derive_metrics(nxt, profile, rng)
    return nxt.with_updates(performance=performance)


class ProcessSimulator:
    """Owns the live process snapshot, its profile and random source."""

    def __init__(
        self,
        profile: Union[ProcessProfile, str] = BASELINE,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if isinstance(profile, str):
            resolved = get_profile(profile)
            if resolved is None:
                raise ValueError(f"Unknown process profile: {profile!r}")
            profile = resolved
        self._profile = profile
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._log = logger or get_logger()
        self._state = initial_state(profile)
        self.ticks = 0

    @property
    def state(self) -> ProcessState:
        return self._state

    @property
    def profile(self) -> ProcessProfile:
        return self._profile

    def step(self) -> ProcessState:
        """Compute the tentative next state without modifying internal state."""
        return tick(self._state, self._profile, self._rng)

    def commit(self, nxt: ProcessState) -> None:
        """Accept a tentative state as the live state."""
        previous = self._state.status
        self._state = nxt
        self.ticks += 1
        self._log.debug(
            "tick %d: P=%.1f Tr=%.1f Ts=%.1f ratio=%.2f cat=%.0f conv=%.1f sel=%.1f",
            self.ticks,
            nxt.pressure,
            nxt.reactor_temp,
            nxt.soec_temp,
            nxt.ratio,
            nxt.catalyst,
            nxt.conversion,
            nxt.selectivity,
        )
        if nxt.status != previous:
            self._log_transition(previous, nxt)

    def advance(self) -> ProcessState:
        """step() then commit(); the timer's entry point."""
        nxt = self.step()
        self.commit(nxt)
        return nxt

    def reset(self) -> ProcessState:
        """Return to the profile's initial state."""
        self._state = initial_state(self._profile)
        self.ticks = 0
        self._log.info("Process reset to %s initial state", self._profile.name)
        return self._state

    def _log_transition(self, previous: Status, state: ProcessState) -> None:
        reasons = "; ".join(status_reasons(state, self._profile)) or "all variables in band"
        level = logging.WARNING if state.status is Status.CRITICAL else logging.INFO
        self._log.log(
            level,
            "Status %s -> %s at tick %d (%s)",
            previous.value,
            state.status.value,
            self.ticks,
            reasons,
        )
