from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, NamedTuple, Tuple


@dataclass(frozen=True)
class Policy:
    """Admin-defined insurance product. Never changes once stored."""

    id: int
    plan: str
    base_rate: str  # display value only, premiums are never derived from it
    deductible: int
    coverage: int
    liability: int
    cover_items: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["cover_items"] = list(self.cover_items)
        return data


@dataclass(frozen=True)
class Selection:
    """One subscriber binding to a policy."""

    policy_id: int
    premium: int
    due_date: datetime


class SelectionHistory(NamedTuple):
    """Parallel views over a subscriber's selections, in insertion order."""

    policy_ids: List[int]
    premiums: List[int]
    due_dates: List[datetime]
