"""Tests for onboarding state model."""

import json
from datetime import datetime, timezone

import pytest

from onboarding.state import OnboardingState, OnboardingStep


class TestOnboardingStep:
    """The step enumeration and its parser."""

    def test_order(self):
        assert [s.value for s in OnboardingStep] == [
            "accounts", "profile", "channels", "tools", "policies", "intro",
        ]

    def test_parse_known(self):
        assert OnboardingStep.parse("tools") is OnboardingStep.TOOLS

    @pytest.mark.parametrize("value", ["", "TOOLS", "payroll", None, 3, ["tools"]])
    def test_parse_rejects_unknown(self, value):
        assert OnboardingStep.parse(value) is None


class TestMarkComplete:

    def test_first_completion_changes_state(self):
        state = OnboardingState(user_id="u1")
        assert state.mark_complete(OnboardingStep.PROFILE) is True
        assert state.is_done(OnboardingStep.PROFILE)
        assert not state.is_done(OnboardingStep.ACCOUNTS)

    def test_repeat_is_noop(self):
        once = OnboardingState(user_id="u1")
        once.mark_complete(OnboardingStep.INTRO)

        twice = OnboardingState(user_id="u1")
        twice.mark_complete(OnboardingStep.INTRO)
        assert twice.mark_complete(OnboardingStep.INTRO) is False

        assert once == twice

    def test_any_order(self):
        state = OnboardingState(user_id="u1")
        for step in reversed(list(OnboardingStep)):
            state.mark_complete(step)
        assert state.is_finished
        assert state.completed() == list(OnboardingStep)

    def test_false_flag_counts_as_incomplete(self):
        state = OnboardingState(user_id="u1", completed_steps={"tools": False})
        assert not state.is_done(OnboardingStep.TOOLS)
        assert state.mark_complete(OnboardingStep.TOOLS) is True


class TestSerialization:

    def test_json_shape(self):
        state = OnboardingState(
            user_id="u1",
            completed_steps={"accounts": True},
            started_at=datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc),
            last_updated=datetime(2026, 1, 6, 10, 0, tzinfo=timezone.utc),
        )
        data = json.loads(state.to_json())
        assert data == {
            "user_id": "u1",
            "completed_steps": {"accounts": True},
            "started_at": "2026-01-05T09:30:00Z",
            "last_updated": "2026-01-06T10:00:00Z",
        }

    def test_roundtrip(self):
        state = OnboardingState(
            user_id="u1",
            completed_steps={"profile": True, "tools": True},
            started_at=datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc),
            last_updated=datetime(2026, 1, 6, 10, 0, tzinfo=timezone.utc),
        )
        assert OnboardingState.from_json(state.to_json()) == state

    def test_reads_record_with_zero_timestamps(self):
        raw = json.dumps({
            "user_id": "u1",
            "completed_steps": {"accounts": True},
            "started_at": "0001-01-01T00:00:00Z",
            "last_updated": "2025-11-02T14:03:11.123456789Z",
        })
        state = OnboardingState.from_json(raw)
        assert state.started_at is None
        assert state.last_updated.year == 2025
        assert state.is_done(OnboardingStep.ACCOUNTS)

    def test_missing_fields(self):
        state = OnboardingState.from_dict({"user_id": "u1"})
        assert state.completed_steps == {}
        assert state.started_at is None
        assert state.last_updated is None
