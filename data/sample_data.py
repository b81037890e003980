"""Generate synthetic test datasets for the Member Attendance Dashboard."""

import pandas as pd
import random
import os
from datetime import datetime, timedelta

FIRST_NAMES = [
    "Ava", "Ben", "Chloe", "Daniel", "Ella", "Finn", "Grace", "Hugo",
    "Isla", "Jack", "Kira", "Liam", "Maya", "Noah", "Olive", "Priya",
    "Quinn", "Ruby", "Sam", "Tara", "Uma", "Victor", "Wren", "Zara",
]
LAST_NAMES = ["Nguyen", "Smith", "Patel", "Garcia", "Kim", "Brown", "Okafor", "Rossi"]
EVENT_TITLES = ["General Meeting", "Workshop", "Social Night", "Volunteer Day"]
ROLES = ["Member", "Member", "Member", "Committee", "Treasurer"]


def generate_members_df(count: int = 24) -> pd.DataFrame:
    """Generate a roster with points and semicolon-separated roles."""
    random.seed(42)
    rows = []
    for i in range(count):
        first = FIRST_NAMES[i % len(FIRST_NAMES)]
        last = LAST_NAMES[i % len(LAST_NAMES)]
        rows.append({
            "Member ID": f"M{i + 1:03d}",
            "Name": f"{first} {last}",
            "Email": f"{first.lower()}.{last.lower()}@example.org",
            "Points": random.randint(0, 120),
            "Roles": random.choice(ROLES),
        })
    return pd.DataFrame(rows)


def generate_events_df(count: int = 12, start: datetime = datetime(2026, 1, 8, 18, 30)) -> pd.DataFrame:
    """Generate weekly events."""
    rows = []
    for i in range(count):
        rows.append({
            "Event ID": f"E{i + 1:03d}",
            "Title": f"{EVENT_TITLES[i % len(EVENT_TITLES)]} #{i // len(EVENT_TITLES) + 1}",
            "Date": start + timedelta(weeks=i),
        })
    return pd.DataFrame(rows)


def generate_attendance_df(members_df: pd.DataFrame = None, events_df: pd.DataFrame = None) -> pd.DataFrame:
    """Generate attendance rows, each member with their own turnout propensity."""
    random.seed(7)
    if members_df is None:
        members_df = generate_members_df()
    if events_df is None:
        events_df = generate_events_df()

    rows = []
    for member_id in members_df["Member ID"]:
        propensity = random.uniform(0.15, 0.95)
        for event_id in events_df["Event ID"]:
            if random.random() < propensity:
                rows.append({"Member ID": member_id, "Event ID": event_id})
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    members_df = generate_members_df()
    events_df = generate_events_df()
    members_df.to_csv(os.path.join(output_dir, "members.csv"), index=False)
    events_df.to_csv(os.path.join(output_dir, "events.csv"), index=False)
    generate_attendance_df(members_df, events_df).to_csv(
        os.path.join(output_dir, "attendance.csv"), index=False,
    )


def generate_sample_excel(output_dir: str):
    """Write a single multi-tab Excel file with all three datasets."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_data.xlsx")
    members_df = generate_members_df()
    events_df = generate_events_df()
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        members_df.to_excel(writer, sheet_name="Members", index=False)
        events_df.to_excel(writer, sheet_name="Events", index=False)
        generate_attendance_df(members_df, events_df).to_excel(writer, sheet_name="Attendance", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
