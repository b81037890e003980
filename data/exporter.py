"""CSV export of per-member attendance statistics."""

import csv
import pandas as pd
from typing import List

from models.stats import MemberAttendanceStat
from engine.explainer import format_rate
from config.defaults import EXPORT_COLUMNS


def stats_to_frame(stats: List[MemberAttendanceStat]) -> pd.DataFrame:
    """One row per member, rate formatted as a one-decimal percentage."""
    rows = [{
        "Member Name": s.member.name,
        "Email": s.member.email,
        "Attendance Rate": format_rate(s.attendance_rate, 1),
        "Events Attended": s.events_attended,
        "Total Events": s.total_events,
    } for s in stats]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def build_attendance_csv(stats: List[MemberAttendanceStat]) -> str:
    """Header row first, every field double-quoted, rows joined by newlines."""
    df = stats_to_frame(stats)
    text = df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return text.rstrip("\n")
