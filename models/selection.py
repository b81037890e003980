from dataclasses import dataclass, field
from typing import Iterable, Iterator, Set


@dataclass
class EventSelection:
    """Event ids the user has put in scope.

    An empty selection means no explicit selection, i.e. every event is in
    scope. Ids that match no known event are kept and simply never match.
    """
    event_ids: Set[str] = field(default_factory=set)

    def toggle(self, event_id: str):
        if event_id in self.event_ids:
            self.event_ids.discard(event_id)
        else:
            self.event_ids.add(event_id)

    def select_all(self, event_ids: Iterable[str]):
        self.event_ids = set(event_ids)

    def clear(self):
        self.event_ids = set()

    @property
    def is_empty(self) -> bool:
        return not self.event_ids

    def __contains__(self, event_id: str) -> bool:
        return event_id in self.event_ids

    def __len__(self) -> int:
        return len(self.event_ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.event_ids)
