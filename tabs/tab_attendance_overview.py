"""Tab 1: Attendance Overview — roll-up figures and low attendance alerts."""

import streamlit as st

from data.session_store import (
    get_members, get_events, get_attendance_records, get_dashboard_config, is_data_loaded,
)
from data.exporter import build_attendance_csv
from components.metrics_cards import render_metric_row, render_alert_card
from components.charts import attendance_rate_histogram, below_threshold_donut
from engine.overview import build_overview
from engine.threshold import build_low_attendance_alerts, filter_below_threshold
from engine.explainer import explain_overview, format_rate
from config.defaults import (
    ALERT_MEMBER_PREVIEW_LIMIT, MISSED_EVENTS_PREVIEW_SIZE, EXPORT_FILE_NAME,
)


def render(sidebar_state):
    """Render the Attendance Overview tab."""
    st.header("Attendance Overview")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Admin tab.")
        return

    cfg = get_dashboard_config()
    threshold = sidebar_state.threshold
    stats, overview = build_overview(
        get_members(), get_events(), get_attendance_records(),
        sidebar_state.selected_event_ids, threshold,
    )

    # --- KPI Metrics ---
    render_metric_row([
        {"label": "Members", "value": f"{overview.total_members:,}"},
        {"label": "Events in Scope", "value": f"{overview.selected_event_count:,}",
         "delta": f"of {overview.total_events:,} events", "delta_color": "off"},
        {"label": "Average Attendance", "value": format_rate(overview.average_attendance_rate)},
        {"label": "Below Threshold", "value": str(overview.members_below_threshold),
         "delta": format_rate(overview.percent_below_threshold),
         "delta_color": "inverse" if overview.members_below_threshold > 0 else "off"},
    ])

    for line in explain_overview(overview, threshold, sidebar_state.is_all_events):
        st.caption(line)

    st.download_button(
        "Export CSV",
        data=build_attendance_csv(stats),
        file_name=EXPORT_FILE_NAME,
        mime="text/csv",
        key="btn_export_csv",
    )

    st.divider()

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(attendance_rate_histogram(stats, threshold), use_container_width=True)
    with col2:
        st.plotly_chart(
            below_threshold_donut(overview.members_below_threshold, overview.total_members),
            use_container_width=True,
        )

    st.divider()

    # --- Alerts ---
    st.subheader("Low Attendance Alerts")

    flagged_total = len(filter_below_threshold(stats, threshold))
    if flagged_total == 0:
        st.success(f"No members below the {format_rate(threshold, 0)} threshold.")
        return

    show_all = st.toggle(f"Show all {flagged_total} members", key="alerts_show_all")
    member_limit = None if show_all else cfg.get("alert_member_preview_limit", ALERT_MEMBER_PREVIEW_LIMIT)
    alerts = build_low_attendance_alerts(
        stats, threshold,
        member_limit=member_limit,
        missed_preview_size=cfg.get("missed_events_preview_size", MISSED_EVENTS_PREVIEW_SIZE),
    )

    st.error(f"{flagged_total} member{'s' if flagged_total != 1 else ''} below threshold")
    for alert in alerts:
        render_alert_card(alert)
    if len(alerts) < flagged_total:
        st.caption(f"Showing {len(alerts)} of {flagged_total}.")
