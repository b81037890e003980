"""Per-event attendance counts for the event summary view."""

from collections import defaultdict
from typing import Dict, List, Set

from models.attendance import AttendanceRecord
from models.event import Event
from models.stats import EventAttendanceSummary


def compute_attendance_counts(
    records: List[AttendanceRecord],
    events: List[Event],
) -> Dict[str, int]:
    """Distinct attendees per known event. Unknown event ids are dropped."""
    known = {e.event_id for e in events}
    attendees: Dict[str, Set[str]] = defaultdict(set)
    for r in records:
        if r.event_id in known:
            attendees[r.event_id].add(r.member_id)
    return {e.event_id: len(attendees.get(e.event_id, ())) for e in events}


def compute_event_summaries(
    events: List[Event],
    attendance_counts: Dict[str, int],
    total_members: int,
) -> List[EventAttendanceSummary]:
    """Summaries for each event, newest first."""
    summaries = []
    for event in sorted(events, key=lambda e: e.timestamp, reverse=True):
        count = attendance_counts.get(event.event_id, 0)
        pct = count / total_members * 100 if total_members > 0 else 0.0
        summaries.append(EventAttendanceSummary(
            event=event,
            attendee_count=count,
            attendance_pct=pct,
        ))
    return summaries
