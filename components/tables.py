"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.stats import MemberAttendanceStat, EventAttendanceSummary
from engine.explainer import format_rate


def member_stats_frame(stats: List[MemberAttendanceStat]) -> pd.DataFrame:
    """Display frame for per-member stats; keeps the raw rate for styling."""
    return pd.DataFrame([{
        "Member": s.member.display_name,
        "Email": s.member.email,
        "Rate": s.attendance_rate,
        "Attended": s.events_attended,
        "Missed": len(s.missed_events),
        "Total": s.total_events,
    } for s in stats], columns=["Member", "Email", "Rate", "Attended", "Missed", "Total"])


def event_summary_frame(summaries: List[EventAttendanceSummary]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Event": s.event.title,
        "Date": s.event.timestamp.strftime("%Y-%m-%d"),
        "Attendees": s.attendee_count,
        "Turnout": format_rate(s.attendance_pct),
    } for s in summaries], columns=["Event", "Date", "Attendees", "Turnout"])


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def render_rate_table(df: pd.DataFrame, threshold: float, rate_column: str = "Rate"):
    """Render a table with rates below threshold highlighted."""
    def color_rate(val):
        try:
            if float(val) < threshold:
                return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if rate_column in df.columns:
        styled = df.style.map(color_rate, subset=[rate_column]).format({rate_column: format_rate})
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
