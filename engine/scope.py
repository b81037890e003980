"""Effective event scope: an empty selection means every event."""

import logging
from typing import Iterable, List, Optional

from models.event import Event

logger = logging.getLogger(__name__)


def is_all_events_scope(selected_event_ids: Optional[Iterable[str]]) -> bool:
    """True when no explicit selection is active."""
    return not set(selected_event_ids or ())


def resolve_in_scope_events(
    events: List[Event],
    selected_event_ids: Optional[Iterable[str]] = None,
) -> List[Event]:
    """Return the events used as the attendance denominator, in event order."""
    selected = set(selected_event_ids or ())
    if not selected:
        logger.debug("No event selection, %d events in scope", len(events))
        return list(events)

    in_scope = [e for e in events if e.event_id in selected]
    logger.debug(
        "Selection of %d ids resolved to %d of %d events",
        len(selected), len(in_scope), len(events),
    )
    return in_scope


def count_selected_events(
    selected_event_ids: Optional[Iterable[str]],
    total_events: int,
) -> int:
    """Selected event count for reporting; falls back to all events when empty."""
    selected = set(selected_event_ids or ())
    return len(selected) if selected else total_events
