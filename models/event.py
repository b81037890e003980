from dataclasses import dataclass
from datetime import datetime


@dataclass
class Event:
    event_id: str
    title: str
    timestamp: datetime

    @property
    def label(self) -> str:
        """Title with date, used in selectors and previews."""
        return f"{self.title} ({self.timestamp:%Y-%m-%d})"
