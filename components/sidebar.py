"""Global sidebar controls for threshold and event selection."""

import streamlit as st
from dataclasses import dataclass
from typing import FrozenSet
from data.session_store import (
    get_events, get_event_selection, get_threshold, set_threshold,
    toggle_event, select_all_events, clear_event_selection, is_data_loaded,
)
from engine.scope import is_all_events_scope, count_selected_events
from engine.explainer import describe_scope
from config.defaults import (
    MIN_ATTENDANCE_THRESHOLD, MAX_ATTENDANCE_THRESHOLD, THRESHOLD_STEP,
)


@dataclass
class SidebarState:
    threshold: float
    selected_event_ids: FrozenSet[str]
    is_all_events: bool
    selected_event_count: int


def _render_event_selection():
    events = get_events()
    selection = get_event_selection()

    col_all, col_clear = st.columns(2)
    with col_all:
        st.button(
            "Select all", key="btn_select_all_events",
            on_click=select_all_events, args=([e.event_id for e in events],),
        )
    with col_clear:
        st.button("Clear", key="btn_clear_events", on_click=clear_event_selection)

    for event in sorted(events, key=lambda e: e.timestamp, reverse=True):
        key = f"event_toggle_{event.event_id}"
        # Keep checkbox state in step with the selection set
        st.session_state[key] = event.event_id in selection
        st.checkbox(event.label, key=key, on_change=toggle_event, args=(event.event_id,))


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Member Attendance")
        st.divider()

        threshold = st.slider(
            "Attendance threshold (%)",
            min_value=MIN_ATTENDANCE_THRESHOLD,
            max_value=MAX_ATTENDANCE_THRESHOLD,
            value=float(get_threshold()),
            step=THRESHOLD_STEP,
            key="sidebar_threshold",
        )
        if threshold != get_threshold():
            set_threshold(threshold)

        st.divider()

        if is_data_loaded():
            st.success("Data loaded")
            with st.expander("Events in scope", expanded=False):
                _render_event_selection()
        else:
            st.warning("No data loaded — go to Admin tab")

        selected = frozenset(get_event_selection())
        all_events = is_all_events_scope(selected)
        selected_count = count_selected_events(selected, len(get_events()))
        st.caption(f"Rates {describe_scope(selected_count, all_events)}")

    return SidebarState(
        threshold=float(threshold),
        selected_event_ids=selected,
        is_all_events=all_events,
        selected_event_count=selected_count,
    )
