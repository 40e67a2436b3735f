"""Plant status classification.

Checks run in a fixed order and the first match wins:

STARTUP   - loop not yet pressurised or a unit still cold.
CRITICAL  - runaway temperature or feed ratio far off stoichiometry.
WARNING   - feed ratio outside the optimum band.
STEADY    - everything else.

A cold, depressurised plant with a hot reactor is reported as STARTUP, not
CRITICAL.
"""

from __future__ import annotations

from typing import List

from methanol_sim.models.constants import ProcessProfile
from methanol_sim.models.process_state import ProcessState, Status


def _startup_reasons(state: ProcessState, profile: ProcessProfile) -> List[str]:
    t = profile.thresholds
    reasons = []
    if state.pressure < t.pressure_startup:
        reasons.append(f"LOW pressure: {state.pressure:.1f} bar < {t.pressure_startup} bar")
    if state.reactor_temp < t.reactor_temp_startup:
        reasons.append(
            f"COLD reactor: {state.reactor_temp:.1f} C < {t.reactor_temp_startup} C"
        )
    if state.soec_temp < t.soec_temp_startup:
        reasons.append(f"COLD SOEC: {state.soec_temp:.1f} C < {t.soec_temp_startup} C")
    return reasons


def _critical_reasons(state: ProcessState, profile: ProcessProfile) -> List[str]:
    t = profile.thresholds
    reasons = []
    if state.reactor_temp > t.reactor_temp_critical:
        reasons.append(
            f"HIGH reactor T: {state.reactor_temp:.1f} C > {t.reactor_temp_critical} C"
        )
    if state.soec_temp > t.soec_temp_critical:
        reasons.append(f"HIGH SOEC T: {state.soec_temp:.1f} C > {t.soec_temp_critical} C")
    if not t.ratio_critical.contains(state.ratio):
        reasons.append(
            f"H2/CO2 ratio {state.ratio:.2f} outside "
            f"[{t.ratio_critical.lo}, {t.ratio_critical.hi}]"
        )
    return reasons


def _warning_reasons(state: ProcessState, profile: ProcessProfile) -> List[str]:
    band = profile.thresholds.ratio_warning
    if band.contains(state.ratio):
        return []
    return [f"H2/CO2 ratio {state.ratio:.2f} off optimum [{band.lo}, {band.hi}]"]


_DECISION_LIST = (
    (Status.STARTUP, _startup_reasons),
    (Status.CRITICAL, _critical_reasons),
    (Status.WARNING, _warning_reasons),
)


def status_reasons(state: ProcessState, profile: ProcessProfile) -> List[str]:
    """Messages for the checks that decided the status (empty when STEADY)."""
    for _, check in _DECISION_LIST:
        reasons = check(state, profile)
        if reasons:
            return reasons
    return []


def classify_status(state: ProcessState, profile: ProcessProfile) -> Status:
    """Return the first matching status in STARTUP, CRITICAL, WARNING order."""
    for status, check in _DECISION_LIST:
        if check(state, profile):
            return status
    return Status.STEADY
