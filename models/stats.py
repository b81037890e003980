from dataclasses import dataclass, field
from typing import List

from models.event import Event
from models.member import Member


@dataclass
class MemberAttendanceStat:
    member: Member
    attendance_rate: float          # 0-100, unrounded
    attended_events: List[Event] = field(default_factory=list)
    missed_events: List[Event] = field(default_factory=list)
    total_events: int = 0
    events_attended: int = 0


@dataclass
class OverviewStat:
    average_attendance_rate: float
    members_below_threshold: int
    percent_below_threshold: float
    total_members: int
    total_events: int
    selected_event_count: int


@dataclass
class LowAttendanceAlert:
    """A below-threshold member with a bounded preview of missed events."""
    stat: MemberAttendanceStat
    missed_preview: List[Event] = field(default_factory=list)
    remaining_missed: int = 0


@dataclass
class EventAttendanceSummary:
    event: Event
    attendee_count: int
    attendance_pct: float           # share of the roster present, 0-100
