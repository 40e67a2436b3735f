from methanol_sim.models.constants import (
    DISPLAY_RANGES,
    STEADY_STATE,
    TICK_INTERVAL_MS,
    ProcessProfile,
)
from methanol_sim.models.process_state import ProcessState, Status

__all__ = [
    "DISPLAY_RANGES",
    "STEADY_STATE",
    "TICK_INTERVAL_MS",
    "ProcessProfile",
    "ProcessState",
    "Status",
]
