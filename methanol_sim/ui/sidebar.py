"""Sidebar: profile selection, live/pause toggle, and process reset."""

from __future__ import annotations

from typing import Tuple

import streamlit as st

from methanol_sim.profiles.library import PROFILE_LIBRARY


def render_sidebar() -> Tuple[str, bool]:
    """Render the sidebar and return (profile_name, live)."""

    st.sidebar.header("Dashboard Profile")

    profile_names = [p.name for p in PROFILE_LIBRARY]
    selected_name = st.sidebar.selectbox(
        "Profile",
        profile_names,
        index=0,
        help="Switching profile restarts the simulation from its initial state.",
    )
    profile = next(p for p in PROFILE_LIBRARY if p.name == selected_name)
    st.sidebar.markdown(f"*{profile.description}*")
    st.sidebar.markdown(
        f"Pressure: {profile.pressure.bounds.lo:.0f}-{profile.pressure.bounds.hi:.0f} bar | "
        f"Startup below {profile.thresholds.pressure_startup:.0f} bar"
    )

    st.sidebar.divider()

    live = st.sidebar.toggle("Live updates", value=True)

    if st.sidebar.button("Reset Process", type="secondary", use_container_width=True):
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()

    return selected_name, live
