from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceRecord:
    """Presence of a member at an event. Absence has no record."""
    member_id: str
    event_id: str
