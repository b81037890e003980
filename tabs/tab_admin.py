"""Tab 5: Admin — data upload, sample data and display settings."""

import logging
import streamlit as st

from data.loader import load_file, load_multi_sheet_excel, parse_members, parse_events, parse_attendance
from data.validator import (
    validate_members, validate_events, validate_attendance, validate_cross_file,
)
from data.sample_data import generate_members_df, generate_events_df, generate_attendance_df
from data.session_store import (
    set_roster_data, get_dashboard_config, set_dashboard_config,
    get_members, get_events, get_attendance_records, is_data_loaded,
)
from engine.attendance_join import count_dangling_records
from config.defaults import (
    ALERT_MEMBER_PREVIEW_LIMIT, MISSED_EVENTS_PREVIEW_SIZE, ROSTER_PAGE_SIZE,
)

logger = logging.getLogger(__name__)


def _load_and_validate(members_df, events_df, attendance_df):
    """Validate and store uploaded data."""
    errors = []
    warnings = []

    for r in [validate_members(members_df), validate_events(events_df), validate_attendance(attendance_df)]:
        errors.extend(r.errors)
        warnings.extend(r.warnings)

    if not errors:
        warnings.extend(validate_cross_file(members_df, events_df, attendance_df).warnings)

    if errors:
        for e in errors:
            st.error(e)
        logger.warning("Upload rejected with %d validation errors", len(errors))
        return False

    for w in warnings:
        st.warning(w)

    members = parse_members(members_df)
    events = parse_events(events_df)
    records = parse_attendance(attendance_df)
    set_roster_data(members, events, records)

    st.success(
        f"Data loaded: {len(members)} members, {len(events)} events, "
        f"{len(records)} attendance records"
    )
    return True


def _load_sample():
    members_df = generate_members_df()
    events_df = generate_events_df()
    _load_and_validate(members_df, events_df, generate_attendance_df(members_df, events_df))


def _render_upload():
    st.subheader("Data Upload")

    upload_mode = st.radio(
        "Upload mode",
        ["Single Excel file (3 tabs)", "Three separate files"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Single Excel file (3 tabs)":
        st.caption(
            "Upload one `.xlsx` file with three sheets named: "
            "**Members**, **Events**, **Attendance** "
            "(also accepts aliases like 'Roster', 'Event Log', 'Check-ins')"
        )
        single_file = st.file_uploader("Excel workbook with 3 tabs", type=["xlsx"], key="upload_single")

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Validate", type="primary", key="btn_upload_single"):
                if single_file:
                    try:
                        m_df, e_df, a_df = load_multi_sheet_excel(single_file)
                        _load_and_validate(m_df, e_df, a_df)
                    except Exception as e:
                        logger.exception("Failed to load workbook")
                        st.error(f"Error loading file: {e}")
                else:
                    st.warning("Please upload an Excel file.")
        with col_sample:
            if st.button("Load Sample Data", key="btn_sample_single"):
                _load_sample()

    else:
        col1, col2, col3 = st.columns(3)
        with col1:
            members_file = st.file_uploader("Members", type=["csv", "xlsx"], key="upload_members")
        with col2:
            events_file = st.file_uploader("Events", type=["csv", "xlsx"], key="upload_events")
        with col3:
            attendance_file = st.file_uploader("Attendance", type=["csv", "xlsx"], key="upload_attendance")

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Validate", type="primary", key="btn_upload_multi"):
                if members_file and events_file and attendance_file:
                    try:
                        _load_and_validate(
                            load_file(members_file),
                            load_file(events_file),
                            load_file(attendance_file),
                        )
                    except Exception as e:
                        logger.exception("Failed to load upload files")
                        st.error(f"Error loading files: {e}")
                else:
                    st.warning("Please upload all three files.")
        with col_sample:
            if st.button("Load Sample Data", key="btn_sample_multi"):
                _load_sample()


def _render_data_health():
    members = get_members()
    events = get_events()
    records = get_attendance_records()

    st.subheader("Data Health Check")
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Members", f"{len(members):,}")
    col2.metric("Events", f"{len(events):,}")
    col3.metric("Attendance Records", f"{len(records):,}")
    dangling = count_dangling_records(records, members, events)
    col4.metric("Ignored Records", f"{dangling:,}")

    if dangling:
        st.info(
            f"{dangling} attendance records reference a member or event that is not loaded. "
            "They are excluded from all statistics."
        )


def _render_display_settings():
    st.subheader("Display Settings")
    cfg = dict(get_dashboard_config())

    col1, col2, col3 = st.columns(3)
    with col1:
        member_limit = st.number_input(
            "Alerts shown before 'show all'", min_value=1, max_value=500,
            value=int(cfg.get("alert_member_preview_limit", ALERT_MEMBER_PREVIEW_LIMIT)),
            key="cfg_alert_limit",
        )
    with col2:
        preview_size = st.number_input(
            "Missed events listed per alert", min_value=0, max_value=50,
            value=int(cfg.get("missed_events_preview_size", MISSED_EVENTS_PREVIEW_SIZE)),
            key="cfg_missed_preview",
        )
    with col3:
        page_size = st.number_input(
            "Roster page size", min_value=5, max_value=200,
            value=int(cfg.get("roster_page_size", ROSTER_PAGE_SIZE)),
            key="cfg_roster_page",
        )

    if st.button("Save Settings", key="btn_save_settings"):
        cfg.update({
            "alert_member_preview_limit": int(member_limit),
            "missed_events_preview_size": int(preview_size),
            "roster_page_size": int(page_size),
        })
        set_dashboard_config(cfg)
        st.success("Settings saved.")


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    _render_upload()

    if is_data_loaded():
        st.divider()
        _render_data_health()

    st.divider()
    _render_display_settings()
