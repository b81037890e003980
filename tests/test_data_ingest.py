"""Tests for loading and validating roster data."""

import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from data.loader import parse_members, parse_events, parse_attendance, load_file, _match_sheet
from data.validator import (
    validate_members, validate_events, validate_attendance, validate_cross_file,
)
from data.sample_data import generate_members_df, generate_events_df, generate_attendance_df


def members_df():
    return pd.DataFrame([
        {"Member ID": 1, "Name": "Ava", "Email": "ava@x.org", "Points": 10, "Roles": "Member; Committee"},
        {"Member ID": 2, "Name": "Ben", "Email": "ben@x.org", "Points": None, "Roles": None},
    ])


def events_df():
    return pd.DataFrame([
        {"Event ID": "E1", "Title": "Kickoff", "Date": "2026-01-08 18:30"},
        {"Event ID": "E2", "Title": "Workshop", "Date": "2026-01-15"},
    ])


def attendance_df():
    return pd.DataFrame([
        {"Member ID": 1, "Event ID": "E1"},
        {"Member ID": 1, "Event ID": "E1"},
        {"Member ID": 9, "Event ID": "E7"},
    ])


class NamedBuffer(io.StringIO):
    def __init__(self, text, name):
        super().__init__(text)
        self.name = name


class TestParsers:
    def test_parse_members(self):
        members = parse_members(members_df())
        assert members[0].member_id == "1"
        assert members[0].roles == ["Member", "Committee"]
        assert members[0].points == 10
        assert members[1].points == 0
        assert members[1].roles == []

    def test_parse_events(self):
        events = parse_events(events_df())
        assert events[0].event_id == "E1"
        assert events[0].timestamp.hour == 18
        assert events[1].timestamp.day == 15

    def test_parse_attendance_ids_are_strings(self):
        records = parse_attendance(attendance_df())
        assert records[0].member_id == "1"
        assert records[0].event_id == "E1"

    def test_float_ids_are_normalised(self):
        df = pd.DataFrame([{"Member ID": 3.0, "Event ID": "E1"}])
        assert parse_attendance(df)[0].member_id == "3"


class TestLoadFile:
    def test_csv(self):
        df = load_file(NamedBuffer("Member ID,Event ID\n1,E1\n", "attendance.CSV"))
        assert list(df.columns) == ["Member ID", "Event ID"]

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            load_file(NamedBuffer("", "attendance.json"))

    def test_match_sheet_alias(self):
        assert _match_sheet(["Roster", "Event Log", "Check-ins"], "members") == "Roster"
        with pytest.raises(ValueError):
            _match_sheet(["Sheet1"], "events")


class TestValidators:
    def test_valid_inputs(self):
        assert validate_members(members_df()).is_valid
        assert validate_events(events_df()).is_valid
        assert validate_attendance(attendance_df()).is_valid

    def test_missing_columns(self):
        result = validate_members(pd.DataFrame([{"Name": "Ava"}]))
        assert not result.is_valid
        assert "Member ID" in result.errors[0]

    def test_duplicate_member_ids(self):
        df = pd.concat([members_df(), members_df()])
        assert not validate_members(df).is_valid

    def test_bad_event_date(self):
        df = events_df()
        df.loc[1, "Date"] = "not a date"
        assert not validate_events(df).is_valid

    def test_cross_file_dangling_and_duplicates_are_warnings(self):
        result = validate_cross_file(members_df(), events_df(), attendance_df())
        assert result.is_valid
        assert len(result.warnings) == 3


class TestEmptyFiles:
    def test_header_only_attendance_is_valid(self):
        df = load_file(NamedBuffer("Member ID,Event ID\n", "attendance.csv"))
        result = validate_attendance(df)
        assert result.is_valid
        assert result.errors == []
        assert parse_attendance(df) == []

    def test_header_only_events_is_valid(self):
        df = load_file(NamedBuffer("Event ID,Title,Date\n", "events.csv"))
        result = validate_events(df)
        assert result.is_valid
        assert result.errors == []
        assert parse_events(df) == []

    def test_header_only_members_is_rejected(self):
        df = load_file(NamedBuffer("Member ID,Name,Email\n", "members.csv"))
        result = validate_members(df)
        assert not result.is_valid
        assert "no data rows" in result.errors[0]

    def test_cross_file_with_no_attendance_has_no_warnings(self):
        empty = load_file(NamedBuffer("Member ID,Event ID\n", "attendance.csv"))
        assert validate_cross_file(members_df(), events_df(), empty).warnings == []


class TestIdNormalisation:
    def test_float_ids_match_members_without_warning(self):
        attendance = pd.DataFrame([{"Member ID": 1.0, "Event ID": "E1"}, {"Member ID": 2.0, "Event ID": "E2"}])
        result = validate_cross_file(members_df(), events_df(), attendance)
        assert result.warnings == []

    def test_padded_ids_match_events_without_warning(self):
        attendance = pd.DataFrame([{"Member ID": " 1 ", "Event ID": " E2"}])
        assert validate_cross_file(members_df(), events_df(), attendance).warnings == []

    def test_duplicate_pairs_differing_by_spaces_are_reported(self):
        attendance = pd.DataFrame([
            {"Member ID": "1", "Event ID": "E1"},
            {"Member ID": " 1", "Event ID": "E1 "},
        ])
        result = validate_cross_file(members_df(), events_df(), attendance)
        assert result.warnings == [
            "1 duplicate attendance rows found. Each member is counted once per event."
        ]

    def test_duplicate_member_ids_after_normalisation(self):
        df = pd.DataFrame([
            {"Member ID": 7, "Name": "Ava", "Email": "a@x.org"},
            {"Member ID": "7 ", "Name": "Ben", "Email": "b@x.org"},
        ])
        assert not validate_members(df).is_valid


class TestSampleData:
    def test_sample_data_is_valid_and_deterministic(self):
        m_df, e_df = generate_members_df(), generate_events_df()
        a_df = generate_attendance_df(m_df, e_df)
        assert validate_members(m_df).is_valid
        assert validate_events(e_df).is_valid
        assert validate_attendance(a_df).is_valid
        assert validate_cross_file(m_df, e_df, a_df).warnings == []
        assert a_df.equals(generate_attendance_df(m_df, e_df))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
