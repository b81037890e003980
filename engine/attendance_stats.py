"""Per-member attendance rates, the core of the attendance engine."""

import logging
from typing import Dict, Iterable, List, Optional, Set

from models.attendance import AttendanceRecord
from models.event import Event
from models.member import Member
from models.stats import MemberAttendanceStat
from engine.attendance_join import (
    build_attendance_index, join_member_attendance, count_dangling_records,
)
from engine.scope import resolve_in_scope_events

logger = logging.getLogger(__name__)


def compute_attendance_rate(events_attended: int, total_events: int) -> float:
    """Attendance as a percentage of in-scope events; 0 when nothing is in scope."""
    if total_events == 0:
        return 0.0
    return events_attended / total_events * 100


def compute_member_stat(
    member: Member,
    in_scope_events: List[Event],
    index: Dict[str, Set[str]],
) -> MemberAttendanceStat:
    attended, missed = join_member_attendance(member, in_scope_events, index)
    total = len(in_scope_events)
    return MemberAttendanceStat(
        member=member,
        attendance_rate=compute_attendance_rate(len(attended), total),
        attended_events=attended,
        missed_events=missed,
        total_events=total,
        events_attended=len(attended),
    )


def compute_attendance_stats(
    members: List[Member],
    events: List[Event],
    attendance_records: List[AttendanceRecord],
    selected_event_ids: Optional[Iterable[str]] = None,
) -> List[MemberAttendanceStat]:
    """Compute one stat per member, in input member order.

    Pure function of its inputs: the same members, events, records and
    selection always give the same result.
    """
    in_scope = resolve_in_scope_events(events, selected_event_ids)
    index = build_attendance_index(attendance_records)

    if logger.isEnabledFor(logging.DEBUG):
        dangling = count_dangling_records(attendance_records, members, events)
        if dangling:
            logger.debug("Ignoring %d attendance records with unknown member or event", dangling)

    return [compute_member_stat(m, in_scope, index) for m in members]
