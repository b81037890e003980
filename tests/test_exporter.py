"""Tests for the CSV export."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from data.exporter import build_attendance_csv, stats_to_frame
from engine.attendance_stats import compute_attendance_stats
from tests.factories import make_member, make_events, make_records


def make_stats():
    members = [
        make_member("A", name="Ava Smith", email="ava@example.org"),
        make_member("B", name="Ben Kim", email="ben@example.org"),
    ]
    events = make_events("E1", "E2", "E3")
    records = make_records(("A", "E1"), ("A", "E2"))
    return compute_attendance_stats(members, events, records)


class TestBuildAttendanceCsv:
    def test_exact_output(self):
        csv_text = build_attendance_csv(make_stats())
        assert csv_text.split("\n") == [
            '"Member Name","Email","Attendance Rate","Events Attended","Total Events"',
            '"Ava Smith","ava@example.org","66.7%","2","3"',
            '"Ben Kim","ben@example.org","0.0%","0","3"',
        ]

    def test_no_trailing_newline(self):
        assert not build_attendance_csv(make_stats()).endswith("\n")

    def test_empty_roster_is_header_only(self):
        assert build_attendance_csv([]) == (
            '"Member Name","Email","Attendance Rate","Events Attended","Total Events"'
        )

    def test_embedded_quotes_are_escaped(self):
        stats = compute_attendance_stats([make_member("A", name='Ava "Ace" Smith')], [], [])
        line = build_attendance_csv(stats).split("\n")[1]
        assert line.startswith('"Ava ""Ace"" Smith"')


class TestStatsToFrame:
    def test_columns(self):
        df = stats_to_frame(make_stats())
        assert list(df.columns) == [
            "Member Name", "Email", "Attendance Rate", "Events Attended", "Total Events",
        ]
        assert df.iloc[0]["Attendance Rate"] == "66.7%"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
