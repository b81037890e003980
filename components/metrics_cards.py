"""Reusable KPI metric card widgets."""

import streamlit as st

from models.stats import LowAttendanceAlert
from engine.explainer import format_rate


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_alert_card(alert: LowAttendanceAlert):
    """Render a low attendance alert with its missed-event preview."""
    stat = alert.stat
    lines = [
        f"**{stat.member.display_name}** — {format_rate(stat.attendance_rate)} "
        f"({stat.events_attended}/{stat.total_events} events)",
    ]
    if alert.missed_preview:
        missed = ", ".join(e.title for e in alert.missed_preview)
        if alert.remaining_missed > 0:
            missed += f" and {alert.remaining_missed} more"
        lines.append(f"Missed: {missed}")
    st.warning("  \n".join(lines), icon="🟡")
