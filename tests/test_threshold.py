"""Tests for the threshold filter and alert previews."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.stats import MemberAttendanceStat
from engine.threshold import filter_below_threshold, build_low_attendance_alerts
from tests.factories import make_member, make_events


def make_stat(member_id="A", rate=0.0, missed=0, total=None):
    missed_events = make_events(*[f"E{i}" for i in range(missed)])
    total = total if total is not None else missed
    return MemberAttendanceStat(
        member=make_member(member_id),
        attendance_rate=rate,
        missed_events=missed_events,
        total_events=total,
        events_attended=total - missed,
    )


class TestFilterBelowThreshold:
    def test_strictly_below(self):
        stats = [make_stat("A", 50.0), make_stat("B", 49.99), make_stat("C", 80.0)]
        result = filter_below_threshold(stats, 50)
        assert [s.member.member_id for s in result] == ["B"]

    def test_uses_unrounded_rate(self):
        # 49.96 would display as 50.0 but is still below
        stats = [make_stat("A", 49.96)]
        assert len(filter_below_threshold(stats, 50)) == 1

    def test_keeps_input_order_for_equal_rates(self):
        stats = [make_stat("C", 10.0), make_stat("A", 10.0), make_stat("B", 5.0)]
        result = filter_below_threshold(stats, 50)
        assert [s.member.member_id for s in result] == ["C", "A", "B"]


class TestBuildLowAttendanceAlerts:
    def test_preview_and_remaining_count(self):
        stats = [make_stat("A", 0.0, missed=5)]
        alerts = build_low_attendance_alerts(stats, 50, missed_preview_size=3)
        assert len(alerts) == 1
        assert [e.event_id for e in alerts[0].missed_preview] == ["E0", "E1", "E2"]
        assert alerts[0].remaining_missed == 2

    def test_preview_larger_than_missed(self):
        alerts = build_low_attendance_alerts([make_stat("A", 0.0, missed=2)], 50, missed_preview_size=3)
        assert len(alerts[0].missed_preview) == 2
        assert alerts[0].remaining_missed == 0

    def test_zero_preview(self):
        alerts = build_low_attendance_alerts([make_stat("A", 0.0, missed=4)], 50, missed_preview_size=0)
        assert alerts[0].missed_preview == []
        assert alerts[0].remaining_missed == 4

    def test_member_limit_is_prefix_by_input_order(self):
        stats = [make_stat("A", 30.0), make_stat("B", 10.0), make_stat("C", 20.0), make_stat("D", 90.0)]
        alerts = build_low_attendance_alerts(stats, 50, member_limit=2)
        assert [a.stat.member.member_id for a in alerts] == ["A", "B"]

    def test_no_limit_returns_all_flagged(self):
        stats = [make_stat("A", 30.0), make_stat("B", 60.0), make_stat("C", 20.0)]
        alerts = build_low_attendance_alerts(stats, 50)
        assert [a.stat.member.member_id for a in alerts] == ["A", "C"]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
