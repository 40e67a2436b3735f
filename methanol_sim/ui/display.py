"""Snapshot-to-display mapping shared by the Streamlit views.

Formatting happens only here; the process state stays numeric.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

from methanol_sim.models.constants import Bounds, DISPLAY_RANGES, DisplayRange, ProcessProfile
from methanol_sim.models.process_state import PRIMARY_FIELDS, ProcessState, Status


OPTIMAL_COLOR = "#2ecc71"
OFF_OPTIMAL_COLOR = "#f1c40f"
NEUTRAL_COLOR = "#3498db"

STATUS_COLORS = {
    Status.STEADY: "#2ecc71",
    Status.WARNING: "#f1c40f",
    Status.CRITICAL: "#e74c3c",
    Status.STARTUP: "#3498db",
}

METRIC_RANGE = Bounds(0.0, 100.0)


@dataclass(frozen=True)
class DisplaySlot:
    """One named dashboard slot."""

    label: str
    text: str
    color: str
    fill: Optional[float] = None  # Bar fill (%) or None for text-only slots


def fill_percent(value: float, bounds: Bounds) -> float:
    """Bar fill proportional to the position of ``value`` within ``bounds``."""
    span = bounds.hi - bounds.lo
    if span <= 0:
        return 100.0
    percent = (value - bounds.lo) / span * 100.0
    return max(0.0, min(100.0, percent))


def bar_color(value: float, optimum: Optional[Bounds]) -> str:
    if optimum is None:
        return NEUTRAL_COLOR
    return OPTIMAL_COLOR if optimum.contains(value) else OFF_OPTIMAL_COLOR


def format_value(value: float, decimals: int, unit: str = "") -> str:
    text = f"{value:.{decimals}f}"
    return f"{text} {unit}" if unit else text


def _display_range(name: str, profile: ProcessProfile) -> DisplayRange:
    display = DISPLAY_RANGES[name]
    if name == "pressure":
        # Pressure bar follows the profile's envelope
        return replace(display, bounds=profile.pressure.bounds)
    return display


def build_display(state: ProcessState, profile: ProcessProfile) -> Dict[str, DisplaySlot]:
    """Map a snapshot to key -> DisplaySlot for every slot the profile shows."""
    slots: Dict[str, DisplaySlot] = {}

    for name in PRIMARY_FIELDS:
        display = _display_range(name, profile)
        value = getattr(state, name)
        slots[name] = DisplaySlot(
            label=display.label,
            text=format_value(value, display.decimals, display.unit),
            color=bar_color(value, display.optimum),
            fill=fill_percent(value, display.bounds),
        )

    metrics = [("conversion", "CO2 Conversion"), ("selectivity", "MeOH Selectivity")]
    if profile.track_performance:
        metrics.append(("performance", "Performance Index"))
    for name, label in metrics:
        value = getattr(state, name)
        if value is None:
            continue
        slots[name] = DisplaySlot(
            label=label,
            text=format_value(value, 1, "%"),
            color=NEUTRAL_COLOR,
            fill=fill_percent(value, METRIC_RANGE),
        )

    slots["status"] = DisplaySlot(
        label="System Status",
        text=state.status.value,
        color=STATUS_COLORS[state.status],
    )
    return slots
