"""Generates human-readable explanations for attendance figures."""

from typing import List

from models.stats import MemberAttendanceStat, OverviewStat
from config.defaults import RATE_DECIMALS


def describe_scope(selected_event_count: int, is_all_events: bool) -> str:
    """Scope wording shown next to every rate."""
    if is_all_events:
        return "based on all events"
    noun = "event" if selected_event_count == 1 else "events"
    return f"based on {selected_event_count} selected {noun}"


def format_rate(rate: float, decimals: int = RATE_DECIMALS) -> str:
    return f"{rate:.{decimals}f}%"


def explain_member_attendance(
    stat: MemberAttendanceStat,
    is_all_events: bool,
) -> List[str]:
    """Produce step-by-step explanation for a member's attendance rate."""
    steps = []

    steps.append(
        f"Step 1 - Scope: {stat.total_events} events in scope "
        f"({describe_scope(stat.total_events, is_all_events)})"
    )

    steps.append(
        f"Step 2 - Attendance: {stat.member.display_name} attended "
        f"{stat.events_attended} and missed {len(stat.missed_events)}"
    )

    if stat.total_events == 0:
        steps.append("Step 3 - Rate: No events in scope => rate 0.0%")
    else:
        steps.append(
            f"Step 3 - Rate: {stat.events_attended} / {stat.total_events} "
            f"=> {format_rate(stat.attendance_rate)}"
        )

    return steps


def explain_overview(
    overview: OverviewStat,
    threshold: float,
    is_all_events: bool,
) -> List[str]:
    """Summary lines for the overview tab."""
    scope = describe_scope(overview.selected_event_count, is_all_events)
    lines = [
        f"Average attendance is {format_rate(overview.average_attendance_rate)} "
        f"across {overview.total_members} members, {scope}.",
    ]

    if overview.total_members == 0:
        lines.append("No members loaded.")
    elif overview.members_below_threshold == 0:
        lines.append(f"No members are below the {format_rate(threshold, 0)} threshold.")
    else:
        lines.append(
            f"{overview.members_below_threshold} of {overview.total_members} members "
            f"({format_rate(overview.percent_below_threshold)}) are below the "
            f"{format_rate(threshold, 0)} threshold."
        )

    return lines
