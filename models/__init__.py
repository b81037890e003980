from models.member import Member
from models.event import Event
from models.attendance import AttendanceRecord
from models.selection import EventSelection
from models.stats import (
    MemberAttendanceStat, OverviewStat, LowAttendanceAlert, EventAttendanceSummary,
)
