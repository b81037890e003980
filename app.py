"""Member Attendance Dashboard — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.logging_config import configure_logging
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_attendance_overview,
    tab_member_attendance,
    tab_event_summary,
    tab_roster,
    tab_admin,
)


def main():
    st.set_page_config(
        page_title="Member Attendance",
        page_icon="📋",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4, tab5 = st.tabs([
        "📊 Attendance Overview",
        "👥 Member Attendance",
        "📅 Event Summary",
        "📇 Roster",
        "⚙️ Admin",
    ])

    with tab1:
        tab_attendance_overview.render(sidebar_state)
    with tab2:
        tab_member_attendance.render(sidebar_state)
    with tab3:
        tab_event_summary.render(sidebar_state)
    with tab4:
        tab_roster.render(sidebar_state)
    with tab5:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
