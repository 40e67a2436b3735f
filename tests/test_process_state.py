"""Tests for process state snapshots."""

import pytest

from methanol_sim.models.constants import STEADY_STATE
from methanol_sim.models.process_state import PRIMARY_FIELDS, ProcessState, Status


class TestProcessState:
    """ProcessState dataclass operations."""

    def test_to_dict_roundtrip(self):
        state = ProcessState(**STEADY_STATE, conversion=65.0, selectivity=90.0)
        restored = ProcessState.from_dict(state.to_dict())
        assert restored == state

    def test_status_serialized_as_string(self):
        state = ProcessState(**STEADY_STATE, status=Status.WARNING)
        assert state.to_dict()["status"] == "WARNING"

    def test_from_dict_parses_status(self):
        d = {**STEADY_STATE, "status": "CRITICAL"}
        assert ProcessState.from_dict(d).status is Status.CRITICAL

    def test_from_dict_ignores_extra_keys(self):
        d = {**STEADY_STATE, "extra_key": 999}
        state = ProcessState.from_dict(d)
        assert state.pressure == STEADY_STATE["pressure"]

    def test_defaults(self):
        state = ProcessState(**STEADY_STATE)
        assert state.performance is None
        assert state.status is Status.STEADY

    def test_immutability(self):
        state = ProcessState(**STEADY_STATE)
        with pytest.raises(AttributeError):
            state.pressure = 70.0

    def test_with_updates_returns_copy(self):
        state = ProcessState(**STEADY_STATE)
        updated = state.with_updates(pressure=70.0)
        assert updated.pressure == 70.0
        assert state.pressure == STEADY_STATE["pressure"]

    def test_primaries(self):
        state = ProcessState(**STEADY_STATE, conversion=50.0)
        primaries = state.primaries()
        assert tuple(primaries) == PRIMARY_FIELDS
        assert "conversion" not in primaries
