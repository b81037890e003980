"""File upload parsing — CSV/XLSX into typed model lists."""

import logging
import pandas as pd
from typing import List, Tuple
from models.member import Member
from models.event import Event
from models.attendance import AttendanceRecord

logger = logging.getLogger(__name__)


def clean_id(value) -> str:
    """Normalise an identifier cell; pandas reads numeric ids as int or float."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _parse_roles(value) -> List[str]:
    if pd.isna(value):
        return []
    return [r.strip() for r in str(value).split(";") if r.strip()]


def parse_members(df: pd.DataFrame) -> List[Member]:
    """Convert a members DataFrame into Member objects."""
    members = []
    for _, row in df.iterrows():
        points = 0
        if "Points" in df.columns and pd.notna(row.get("Points")):
            points = int(row["Points"])
        roles = _parse_roles(row["Roles"]) if "Roles" in df.columns else []
        members.append(Member(
            member_id=clean_id(row["Member ID"]),
            name=str(row["Name"]).strip() if pd.notna(row["Name"]) else "",
            email=str(row["Email"]).strip() if pd.notna(row["Email"]) else "",
            points=points,
            roles=roles,
        ))
    logger.info("Parsed %d members", len(members))
    return members


def parse_events(df: pd.DataFrame) -> List[Event]:
    """Convert an events DataFrame into Event objects."""
    events = []
    for _, row in df.iterrows():
        events.append(Event(
            event_id=clean_id(row["Event ID"]),
            title=str(row["Title"]).strip(),
            timestamp=pd.to_datetime(row["Date"]).to_pydatetime(),
        ))
    logger.info("Parsed %d events", len(events))
    return events


def parse_attendance(df: pd.DataFrame) -> List[AttendanceRecord]:
    """Convert an attendance DataFrame into AttendanceRecord objects."""
    records = []
    for _, row in df.iterrows():
        records.append(AttendanceRecord(
            member_id=clean_id(row["Member ID"]),
            event_id=clean_id(row["Event ID"]),
        ))
    logger.info("Parsed %d attendance records", len(records))
    return records


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for multi-tab Excel (case-insensitive matching)
SHEET_ALIASES = {
    "members": ["members", "member", "roster", "membership"],
    "events": ["events", "event", "event log", "calendar"],
    "attendance": ["attendance", "check-ins", "checkins", "sign-ins"],
}


def _match_sheet(sheet_names: List[str], category: str) -> str:
    """Find a sheet name matching the given category. Returns the matched name or raises."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    raise ValueError(
        f"Could not find a sheet for '{category}'. "
        f"Expected one of: {aliases}. "
        f"Found sheets: {sheet_names}"
    )


def load_multi_sheet_excel(uploaded_file) -> Tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
    """Load a single Excel file with 3 tabs: Members, Events, Attendance.

    Sheet names are matched case-insensitively against SHEET_ALIASES.

    Returns (members_df, events_df, attendance_df).
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    members_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "members"))
    events_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "events"))
    attendance_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "attendance"))

    return members_df, events_df, attendance_df
