"""Joins members, in-scope events and attendance records."""

import logging
from collections import defaultdict
from typing import Dict, List, Set, Tuple

from models.attendance import AttendanceRecord
from models.event import Event
from models.member import Member

logger = logging.getLogger(__name__)


def build_attendance_index(records: List[AttendanceRecord]) -> Dict[str, Set[str]]:
    """Index attended event ids by member id. Duplicate pairs collapse."""
    index: Dict[str, Set[str]] = defaultdict(set)
    for r in records:
        index[r.member_id].add(r.event_id)
    logger.debug("Indexed %d attendance records for %d members", len(records), len(index))
    return dict(index)


def join_member_attendance(
    member: Member,
    in_scope_events: List[Event],
    index: Dict[str, Set[str]],
) -> Tuple[List[Event], List[Event]]:
    """Partition in-scope events into (attended, missed) for one member.

    Records pointing at unknown members or events never match anything here,
    so they drop out without error.
    """
    attended_ids = index.get(member.member_id, set())
    attended = []
    missed = []
    for event in in_scope_events:
        if event.event_id in attended_ids:
            attended.append(event)
        else:
            missed.append(event)
    return attended, missed


def count_dangling_records(
    records: List[AttendanceRecord],
    members: List[Member],
    events: List[Event],
) -> int:
    """Number of records referencing a member or event that does not exist."""
    member_ids = {m.member_id for m in members}
    event_ids = {e.event_id for e in events}
    return sum(
        1 for r in records
        if r.member_id not in member_ids or r.event_id not in event_ids
    )
