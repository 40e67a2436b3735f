"""Tests for the snapshot-to-display mapping and schematic drawing."""

import pytest

from methanol_sim.models.constants import Bounds
from methanol_sim.models.process import initial_state
from methanol_sim.models.process_state import PRIMARY_FIELDS, Status
from methanol_sim.profiles.library import BASELINE, REVISED
from methanol_sim.ui.display import (
    NEUTRAL_COLOR,
    OFF_OPTIMAL_COLOR,
    OPTIMAL_COLOR,
    STATUS_COLORS,
    bar_color,
    build_display,
    fill_percent,
)
from methanol_sim.ui.schematic import HEIGHT, WIDTH, draw_schematic


class TestFillPercent:
    def test_midpoint(self):
        assert fill_percent(65.0, Bounds(50.0, 80.0)) == pytest.approx(50.0)

    def test_clamped(self):
        assert fill_percent(40.0, Bounds(50.0, 80.0)) == 0.0
        assert fill_percent(90.0, Bounds(50.0, 80.0)) == 100.0

    def test_degenerate_range(self):
        assert fill_percent(5.0, Bounds(5.0, 5.0)) == 100.0


class TestBarColor:
    def test_inside_optimum(self):
        assert bar_color(3.0, Bounds(2.8, 3.2)) == OPTIMAL_COLOR

    def test_outside_optimum(self):
        assert bar_color(3.25, Bounds(2.8, 3.2)) == OFF_OPTIMAL_COLOR

    def test_no_optimum(self):
        assert bar_color(65.0, None) == NEUTRAL_COLOR


class TestBuildDisplay:
    def test_baseline_slots(self):
        slots = build_display(initial_state(BASELINE), BASELINE)
        assert set(slots) == set(PRIMARY_FIELDS) | {"conversion", "selectivity", "status"}

    def test_baseline_formatting(self):
        slots = build_display(initial_state(BASELINE), BASELINE)
        assert slots["pressure"].text == "65.0 bar"
        assert slots["ratio"].text == "3.00"
        assert slots["catalyst"].text == "720 kg"
        assert slots["conversion"].text == "65.0 %"
        assert slots["selectivity"].text == "90.0 %"

    def test_status_slot(self):
        slots = build_display(initial_state(BASELINE), BASELINE)
        assert slots["status"].text == "STEADY"
        assert slots["status"].color == STATUS_COLORS[Status.STEADY]
        assert slots["status"].fill is None

    def test_optimum_highlight(self):
        state = initial_state(BASELINE).with_updates(catalyst=760.0)
        slots = build_display(state, BASELINE)
        assert slots["ratio"].color == OPTIMAL_COLOR
        assert slots["catalyst"].color == OFF_OPTIMAL_COLOR
        assert slots["pressure"].color == NEUTRAL_COLOR

    def test_revised_has_performance(self):
        slots = build_display(initial_state(REVISED), REVISED)
        assert slots["performance"].text == "90.2 %"

    def test_pressure_bar_follows_profile(self):
        slots = build_display(initial_state(REVISED), REVISED)
        assert slots["pressure"].fill == pytest.approx(70.0)

    def test_every_status_has_color(self):
        assert set(STATUS_COLORS) == set(Status)


class TestSchematic:
    def test_draws_full_canvas(self):
        slots = build_display(initial_state(REVISED), REVISED)
        img = draw_schematic(slots)
        assert img.size == (WIDTH, HEIGHT)
