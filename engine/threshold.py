"""Selects members below the attendance threshold for alerting."""

from typing import List, Optional

from models.stats import LowAttendanceAlert, MemberAttendanceStat
from config.defaults import MISSED_EVENTS_PREVIEW_SIZE


def filter_below_threshold(
    stats: List[MemberAttendanceStat],
    threshold: float,
) -> List[MemberAttendanceStat]:
    """Members with rate strictly below threshold, in input order."""
    return [s for s in stats if s.attendance_rate < threshold]


def build_low_attendance_alerts(
    stats: List[MemberAttendanceStat],
    threshold: float,
    member_limit: Optional[int] = None,
    missed_preview_size: int = MISSED_EVENTS_PREVIEW_SIZE,
) -> List[LowAttendanceAlert]:
    """Alerts for below-threshold members with a bounded missed-event preview.

    ``member_limit`` keeps a prefix in input order, not a ranking by rate.
    """
    flagged = filter_below_threshold(stats, threshold)
    if member_limit is not None:
        flagged = flagged[:max(0, member_limit)]

    preview_size = max(0, missed_preview_size)
    alerts = []
    for s in flagged:
        preview = s.missed_events[:preview_size]
        alerts.append(LowAttendanceAlert(
            stat=s,
            missed_preview=preview,
            remaining_missed=len(s.missed_events) - len(preview),
        ))
    return alerts
