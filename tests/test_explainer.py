"""Tests for attendance explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.stats import OverviewStat
from engine.attendance_stats import compute_attendance_stats
from engine.explainer import describe_scope, format_rate, explain_member_attendance, explain_overview
from tests.factories import make_member, make_events, make_records


class TestDescribeScope:
    def test_all_events(self):
        assert describe_scope(12, True) == "based on all events"

    def test_selected_events(self):
        assert describe_scope(3, False) == "based on 3 selected events"
        assert describe_scope(1, False) == "based on 1 selected event"


class TestFormatRate:
    def test_one_decimal(self):
        assert format_rate(100 / 3) == "33.3%"
        assert format_rate(50) == "50.0%"

    def test_custom_decimals(self):
        assert format_rate(50, 0) == "50%"


class TestExplainMemberAttendance:
    def test_steps(self):
        stats = compute_attendance_stats(
            [make_member("A", name="Ava")], make_events("E1", "E2"), make_records(("A", "E1")),
        )
        steps = explain_member_attendance(stats[0], is_all_events=True)
        assert len(steps) == 3
        assert "based on all events" in steps[0]
        assert "Ava attended 1 and missed 1" in steps[1]
        assert "1 / 2 => 50.0%" in steps[2]

    def test_no_events(self):
        stats = compute_attendance_stats([make_member("A")], [], [])
        steps = explain_member_attendance(stats[0], is_all_events=True)
        assert "rate 0.0%" in steps[2]


class TestExplainOverview:
    def test_below_threshold_line(self):
        overview = OverviewStat(25.0, 1, 50.0, 2, 2, 1)
        lines = explain_overview(overview, 50, is_all_events=False)
        assert "based on 1 selected event" in lines[0]
        assert lines[1] == "1 of 2 members (50.0%) are below the 50% threshold."

    def test_nobody_below(self):
        overview = OverviewStat(90.0, 0, 0.0, 3, 4, 4)
        lines = explain_overview(overview, 50, is_all_events=True)
        assert lines[1] == "No members are below the 50% threshold."

    def test_no_members(self):
        overview = OverviewStat(0.0, 0, 0.0, 0, 4, 4)
        assert explain_overview(overview, 50, True)[1] == "No members loaded."


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
