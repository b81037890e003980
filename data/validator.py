"""Schema validation for uploaded data files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from data.loader import clean_id


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


MEMBER_REQUIRED_COLUMNS = [
    "Member ID",
    "Name",
    "Email",
]

EVENT_REQUIRED_COLUMNS = [
    "Event ID",
    "Title",
    "Date",
]

ATTENDANCE_REQUIRED_COLUMNS = [
    "Member ID",
    "Event ID",
]


def _check_required_columns(
    df: pd.DataFrame,
    required: List[str],
    file_label: str,
    allow_empty: bool = False,
) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty and not allow_empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def _clean_ids(series: pd.Series) -> pd.Series:
    """Normalise ids the same way the loader does before the engine joins on them."""
    return series.map(clean_id)


def _id_set(series: pd.Series) -> set:
    return set(_clean_ids(series))


def validate_members(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, MEMBER_REQUIRED_COLUMNS, "Members")
    if not result.is_valid:
        return result

    ids = _clean_ids(df["Member ID"])
    dupes = ids.duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Members: Duplicate member IDs: {sorted(ids[dupes].unique().tolist())}")

    if "Points" in df.columns:
        points = pd.to_numeric(df["Points"], errors="coerce")
        if (points.isna() & df["Points"].notna()).any():
            result.is_valid = False
            result.errors.append("Members: Points must be numeric.")

    return result


def validate_events(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, EVENT_REQUIRED_COLUMNS, "Events", allow_empty=True)
    if not result.is_valid:
        return result

    ids = _clean_ids(df["Event ID"])
    dupes = ids.duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Events: Duplicate event IDs: {sorted(ids[dupes].unique().tolist())}")

    dates = df["Date"].apply(lambda v: pd.to_datetime(v, errors="coerce"))
    if dates.isna().any():
        result.is_valid = False
        result.errors.append("Events: Date must be a valid date or timestamp.")

    return result


def validate_attendance(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ATTENDANCE_REQUIRED_COLUMNS, "Attendance", allow_empty=True)
    if not result.is_valid:
        return result

    if df[ATTENDANCE_REQUIRED_COLUMNS].isna().any().any():
        result.is_valid = False
        result.errors.append("Attendance: Member ID and Event ID are required on every row.")

    return result


def validate_cross_file(
    members_df: pd.DataFrame,
    events_df: pd.DataFrame,
    attendance_df: pd.DataFrame,
) -> ValidationResult:
    """Check attendance references against members and events.

    Dangling references are warnings only: the attendance engine ignores them.
    """
    result = ValidationResult()
    member_ids = _id_set(members_df["Member ID"])
    event_ids = _id_set(events_df["Event ID"])
    att_members = _id_set(attendance_df["Member ID"])
    att_events = _id_set(attendance_df["Event ID"])

    unknown_members = att_members - member_ids
    unknown_events = att_events - event_ids

    if unknown_members:
        result.warnings.append(
            f"Attendance for unknown members: {', '.join(sorted(unknown_members))}. "
            "These will be ignored."
        )
    if unknown_events:
        result.warnings.append(
            f"Attendance for unknown events: {', '.join(sorted(unknown_events))}. "
            "These will be ignored."
        )

    pairs = pd.DataFrame({
        "member_id": _clean_ids(attendance_df["Member ID"]),
        "event_id": _clean_ids(attendance_df["Event ID"]),
    })
    dupe_count = int(pairs.duplicated().sum())
    if dupe_count:
        result.warnings.append(
            f"{dupe_count} duplicate attendance rows found. Each member is counted once per event."
        )
    return result
