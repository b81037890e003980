"""Roster search, ordering and pagination."""

import math
from typing import List, Sequence, Tuple, TypeVar

from models.member import Member

T = TypeVar("T")


def search_members(members: List[Member], query: str) -> List[Member]:
    """Case-insensitive substring match over name and email."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(members)
    return [
        m for m in members
        if needle in (m.name or "").lower() or needle in (m.email or "").lower()
    ]


def sort_by_points(members: List[Member]) -> List[Member]:
    """Highest points first; ties keep roster order."""
    return sorted(members, key=lambda m: -m.points)


def paginate(items: Sequence[T], page: int, page_size: int) -> Tuple[List[T], int]:
    """Return (items on page, total pages). Pages are 1-based and clamped."""
    page_size = max(1, page_size)
    total_pages = max(1, math.ceil(len(items) / page_size))
    page = min(max(1, page), total_pages)
    start = (page - 1) * page_size
    return list(items[start:start + page_size]), total_pages
