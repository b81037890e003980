"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import Iterable, List
from models.member import Member
from models.event import Event
from models.attendance import AttendanceRecord
from models.selection import EventSelection
from config.defaults import (
    DEFAULT_ATTENDANCE_THRESHOLD, ALERT_MEMBER_PREVIEW_LIMIT,
    MISSED_EVENTS_PREVIEW_SIZE, ROSTER_PAGE_SIZE,
)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "members": [],
        "events": [],
        "attendance_records": [],
        "event_selection": EventSelection(),
        "attendance_threshold": DEFAULT_ATTENDANCE_THRESHOLD,
        "data_loaded": False,
        "dashboard_config": {
            "alert_member_preview_limit": ALERT_MEMBER_PREVIEW_LIMIT,
            "missed_events_preview_size": MISSED_EVENTS_PREVIEW_SIZE,
            "roster_page_size": ROSTER_PAGE_SIZE,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_members() -> List[Member]:
    return st.session_state.get("members", [])


def get_events() -> List[Event]:
    return st.session_state.get("events", [])


def get_attendance_records() -> List[AttendanceRecord]:
    return st.session_state.get("attendance_records", [])


def get_event_selection() -> EventSelection:
    return st.session_state.get("event_selection", EventSelection())


def get_threshold() -> float:
    return st.session_state.get("attendance_threshold", DEFAULT_ATTENDANCE_THRESHOLD)


def get_dashboard_config() -> dict:
    return st.session_state.get("dashboard_config", {})


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_roster_data(
    members: List[Member],
    events: List[Event],
    attendance_records: List[AttendanceRecord],
):
    """Replace all three collections at once and drop the stale selection."""
    st.session_state["members"] = members
    st.session_state["events"] = events
    st.session_state["attendance_records"] = attendance_records
    st.session_state["event_selection"] = EventSelection()
    st.session_state["data_loaded"] = True


def set_threshold(threshold: float):
    st.session_state["attendance_threshold"] = float(threshold)


def set_dashboard_config(config: dict):
    st.session_state["dashboard_config"] = config


# --- Event Selection ---

def toggle_event(event_id: str):
    get_event_selection().toggle(event_id)


def select_all_events(event_ids: Iterable[str]):
    get_event_selection().select_all(event_ids)


def clear_event_selection():
    get_event_selection().clear()
