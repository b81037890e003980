from dataclasses import dataclass, field
from typing import List


@dataclass
class Member:
    member_id: str
    name: str
    email: str
    points: int = 0
    roles: List[str] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or self.email or self.member_id
