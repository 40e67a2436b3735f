"""KPI dashboard with live process values."""

from __future__ import annotations

from typing import Dict, List

import streamlit as st

from methanol_sim.models.process_state import PRIMARY_FIELDS
from methanol_sim.ui.display import DisplaySlot


def _render_bar(slot: DisplaySlot) -> None:
    fill = slot.fill if slot.fill is not None else 0.0
    st.markdown(
        f"<div style='background:#2c3e50;border-radius:4px;height:10px;'>"
        f"<div style='width:{fill:.1f}%;background:{slot.color};"
        f"height:10px;border-radius:4px;'></div></div>",
        unsafe_allow_html=True,
    )


def render_status(slot: DisplaySlot, reasons: List[str]) -> None:
    """Render the status banner with the checks that decided it."""
    st.markdown(
        f"### {slot.label}: <span style='color:{slot.color}'>{slot.text}</span>",
        unsafe_allow_html=True,
    )
    for reason in reasons:
        st.caption(reason)


def render_dashboard(slots: Dict[str, DisplaySlot]) -> None:
    """Render the process variables row and the performance row."""

    st.markdown("### Process Variables")

    columns = st.columns(len(PRIMARY_FIELDS))
    for col, name in zip(columns, PRIMARY_FIELDS):
        slot = slots[name]
        with col:
            st.metric(slot.label, slot.text)
            _render_bar(slot)

    st.markdown("### Performance Estimation")

    metric_keys = [k for k in ("conversion", "selectivity", "performance") if k in slots]
    for col, name in zip(st.columns(len(metric_keys)), metric_keys):
        slot = slots[name]
        with col:
            st.metric(slot.label, slot.text)
            _render_bar(slot)
