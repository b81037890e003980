"""Roll-up statistics across all members."""

from typing import Iterable, List, Optional, Tuple

from models.attendance import AttendanceRecord
from models.event import Event
from models.member import Member
from models.stats import MemberAttendanceStat, OverviewStat
from engine.attendance_stats import compute_attendance_stats
from engine.scope import count_selected_events


def compute_overview(
    stats: List[MemberAttendanceStat],
    threshold: float,
    total_members: int,
    total_events: int,
    selected_event_count: int,
) -> OverviewStat:
    """Average rate and below-threshold share. Below means strictly less than."""
    if total_members > 0:
        average = sum(s.attendance_rate for s in stats) / total_members
    else:
        average = 0.0

    below = sum(1 for s in stats if s.attendance_rate < threshold)
    percent_below = below / total_members * 100 if total_members > 0 else 0.0

    return OverviewStat(
        average_attendance_rate=average,
        members_below_threshold=below,
        percent_below_threshold=percent_below,
        total_members=total_members,
        total_events=total_events,
        selected_event_count=selected_event_count,
    )


def build_overview(
    members: List[Member],
    events: List[Event],
    attendance_records: List[AttendanceRecord],
    selected_event_ids: Optional[Iterable[str]],
    threshold: float,
) -> Tuple[List[MemberAttendanceStat], OverviewStat]:
    """Full pipeline: per-member stats then the roll-up over them."""
    selected = set(selected_event_ids or ())
    stats = compute_attendance_stats(members, events, attendance_records, selected)
    overview = compute_overview(
        stats,
        threshold,
        total_members=len(members),
        total_events=len(events),
        selected_event_count=count_selected_events(selected, len(events)),
    )
    return stats, overview
