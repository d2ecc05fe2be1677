from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Type, TypeVar

from .models import Policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolicyCreated:
    policy: Policy
    creator: str

    name = "policy.created"

    def payload(self) -> Dict[str, Any]:
        return {"creator": self.creator, **self.policy.to_dict()}


@dataclass(frozen=True)
class PolicySelected:
    subscriber: str
    policy_id: int
    premium: int
    due_date: datetime

    name = "policy.selected"

    def payload(self) -> Dict[str, Any]:
        return {
            "subscriber": self.subscriber,
            "policy_id": self.policy_id,
            "premium": self.premium,
            "due_date": self.due_date.isoformat(),
        }


Listener = Callable[[Any], None]
E = TypeVar("E")


class EventLog:
    """Ordered record of ledger notifications with optional listeners.

    Delivery is fire-and-forget: a listener that raises is logged and skipped.
    """

    def __init__(self) -> None:
        self._events: List[Any] = []
        self._listeners: List[Listener] = []

    @property
    def events(self) -> List[Any]:
        return list(self._events)

    def of_type(self, event_type: Type[E]) -> List[E]:
        return [event for event in self._events if isinstance(event, event_type)]

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def emit(self, event: Any) -> None:
        self._events.append(event)
        logger.info("Emitted %s", event.name, extra={"event": event.payload()})
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event.name)
