"""Tab 3: Event Summary — attendee counts per event."""

import streamlit as st

from data.session_store import get_members, get_events, get_attendance_records, is_data_loaded
from components.tables import event_summary_frame, render_styled_table
from components.charts import event_attendance_bar
from engine.event_summary import compute_attendance_counts, compute_event_summaries
from engine.scope import resolve_in_scope_events


def render(sidebar_state):
    """Render the Event Summary tab."""
    st.header("Event Summary")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Admin tab.")
        return

    events = get_events()
    if not events:
        st.info("No events loaded.")
        return

    in_scope = resolve_in_scope_events(events, sidebar_state.selected_event_ids)
    counts = compute_attendance_counts(get_attendance_records(), events)
    summaries = compute_event_summaries(in_scope, counts, len(get_members()))

    if not summaries:
        st.info("None of the selected events exist in the event log.")
        return

    st.plotly_chart(event_attendance_bar(summaries), use_container_width=True)
    render_styled_table(event_summary_frame(summaries), title="Events")
