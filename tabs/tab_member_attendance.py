"""Tab 2: Member Attendance — per-member table and rate explanation."""

import streamlit as st

from data.session_store import get_members, get_events, get_attendance_records, is_data_loaded
from components.tables import member_stats_frame, render_rate_table
from engine.attendance_stats import compute_attendance_stats
from engine.explainer import explain_member_attendance


def render(sidebar_state):
    """Render the Member Attendance tab."""
    st.header("Member Attendance")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Admin tab.")
        return

    stats = compute_attendance_stats(
        get_members(), get_events(), get_attendance_records(),
        sidebar_state.selected_event_ids,
    )
    if not stats:
        st.info("The roster is empty.")
        return

    only_below = st.checkbox("Only members below threshold", key="member_only_below")
    shown = [s for s in stats if s.attendance_rate < sidebar_state.threshold] if only_below else stats

    df = member_stats_frame(shown)
    df = df.sort_values("Rate", kind="stable").reset_index(drop=True)
    render_rate_table(df, sidebar_state.threshold)

    st.divider()
    st.subheader("Member Detail")

    stat_by_id = {s.member.member_id: s for s in stats}
    member_id = st.selectbox(
        "Member",
        options=list(stat_by_id.keys()),
        format_func=lambda mid: stat_by_id[mid].member.display_name,
        key="member_detail_select",
    )
    stat = stat_by_id[member_id]

    for step in explain_member_attendance(stat, sidebar_state.is_all_events):
        st.markdown(f"- {step}")

    col_att, col_miss = st.columns(2)
    with col_att:
        st.markdown(f"**Attended ({stat.events_attended})**")
        for e in stat.attended_events:
            st.markdown(f"- {e.label}")
    with col_miss:
        st.markdown(f"**Missed ({len(stat.missed_events)})**")
        for e in stat.missed_events:
            st.markdown(f"- {e.label}")
