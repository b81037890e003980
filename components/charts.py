"""Plotly chart builders for the Member Attendance Dashboard."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from models.stats import MemberAttendanceStat, EventAttendanceSummary


def attendance_rate_histogram(
    stats: List[MemberAttendanceStat],
    threshold: float,
    title: str = "Attendance Rate Distribution",
) -> go.Figure:
    """Histogram of member rates with the threshold marked."""
    df = pd.DataFrame({"rate": [s.attendance_rate for s in stats]})
    fig = px.histogram(
        df, x="rate", nbins=10, range_x=[0, 100],
        labels={"rate": "Attendance Rate (%)", "count": "Members"},
        title=title,
        color_discrete_sequence=["#4A90D9"],
    )
    fig.add_vline(
        x=threshold, line_dash="dash", line_color="#E8734A",
        annotation_text=f"Threshold {threshold:.0f}%",
    )
    fig.update_layout(height=350, bargap=0.05, yaxis_title="Members")
    return fig


def below_threshold_donut(below: int, total: int, title: str = "Below Threshold") -> go.Figure:
    """Donut chart of members below vs at/above threshold."""
    fig = go.Figure(data=[go.Pie(
        labels=["Below", "At or above"],
        values=[below, max(0, total - below)],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{below}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def event_attendance_bar(
    summaries: List[EventAttendanceSummary],
    title: str = "Attendees per Event",
) -> go.Figure:
    """Bar chart of attendee counts in chronological order."""
    ordered = sorted(summaries, key=lambda s: s.event.timestamp)
    df = pd.DataFrame({
        "event": [s.event.label for s in ordered],
        "attendees": [s.attendee_count for s in ordered],
    })
    fig = px.bar(
        df, x="event", y="attendees",
        labels={"event": "Event", "attendees": "Attendees"},
        title=title,
        color_discrete_sequence=["#4A90D9"],
    )
    fig.update_layout(height=400, xaxis_tickangle=-45)
    return fig
