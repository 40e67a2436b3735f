"""SOEC-fed CO2-to-Methanol Process Dashboard.

A live simulation of a methanol synthesis loop fed by a solid-oxide
electrolysis stack. Primary variables drift within their operating windows,
conversion, selectivity and performance are estimated each tick, and the
plant status is classified for the operator.
"""

from __future__ import annotations

import streamlit as st

from methanol_sim.logger import get_logger
from methanol_sim.models.constants import TICK_INTERVAL_MS
from methanol_sim.models.process import ProcessSimulator
from methanol_sim.status.classifier import status_reasons
from methanol_sim.ui.dashboard import render_dashboard, render_status
from methanol_sim.ui.display import build_display
from methanol_sim.ui.schematic import render_schematic
from methanol_sim.ui.sidebar import render_sidebar


log = get_logger()


# ---------------------------------------------------------------------------
# Session state initialization
# ---------------------------------------------------------------------------

def _init_session(profile_name: str) -> None:
    """Create the simulator on first load or when the profile changes."""
    sim = st.session_state.get("simulator")
    if sim is None or sim.profile.name != profile_name:
        st.session_state.simulator = ProcessSimulator(profile_name)
        log.info("Started %s profile", profile_name)


# ---------------------------------------------------------------------------
# Live panel
# ---------------------------------------------------------------------------

def _live_panel(advance: bool) -> None:
    """Advance one tick (when live) and render the snapshot."""
    sim: ProcessSimulator = st.session_state.simulator
    state = sim.advance() if advance else sim.state

    slots = build_display(state, sim.profile)

    render_status(slots["status"], status_reasons(state, sim.profile))
    st.caption(f"Tick {sim.ticks} | refresh every {TICK_INTERVAL_MS / 1000:.0f} s")

    render_dashboard(slots)

    st.divider()

    render_schematic(slots)


# ---------------------------------------------------------------------------
# Main app
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(
        page_title="Methanol Process Dashboard",
        page_icon="🏭",
        layout="wide",
    )

    profile_name, live = render_sidebar()
    _init_session(profile_name)

    st.markdown(
        "# CO2-to-Methanol Process Dashboard\n"
        "*SOEC hydrogen supply, methanol synthesis loop, live performance estimation*"
    )

    run_every = TICK_INTERVAL_MS / 1000.0 if live else None
    st.fragment(run_every=run_every)(_live_panel)(advance=live)


if __name__ == "__main__":
    main()
