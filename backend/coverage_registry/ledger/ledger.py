from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional, Set

from coverage_registry.access import RoleAuthority
from coverage_registry.pricing import PriceReferenceAdapter
from .events import EventLog, PolicyCreated, PolicySelected
from .exceptions import NotFoundError, PolicyValidationError
from .models import Policy, Selection, SelectionHistory

logger = logging.getLogger(__name__)

DEFAULT_RENEWAL_PERIOD = timedelta(days=365)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PolicyLedger:
    """Policy products and the append-only selections made against them.

    Products are defined by administrators and numbered from 1. Selections are
    recorded per subscriber with a premium converted through the price reference
    and a due date one renewal period after the selection.
    """

    def __init__(
        self,
        authority: RoleAuthority,
        price_adapter: PriceReferenceAdapter,
        events: Optional[EventLog] = None,
        clock: Callable[[], datetime] = _utcnow,
        renewal_period: timedelta = DEFAULT_RENEWAL_PERIOD,
    ) -> None:
        self._authority = authority
        self._price_adapter = price_adapter
        self.events = events or EventLog()
        self._clock = clock
        self._renewal_period = renewal_period

        self._policy_count = 0
        self._policies: Dict[int, Policy] = {}
        self._selections: Dict[str, List[Selection]] = {}
        self._subscribers: Set[str] = set()
        self._select_lock = asyncio.Lock()

    @property
    def policy_count(self) -> int:
        return self._policy_count

    def create_policy(
        self,
        caller: str,
        plan: str,
        base_rate: str,
        deductible: int,
        coverage: int,
        liability: int,
        cover_items: Iterable[str] = (),
    ) -> int:
        self._authority.require_admin(caller, "create a policy")
        for field_name, value in (
            ("deductible", deductible),
            ("coverage", coverage),
            ("liability", liability),
        ):
            self._require_unsigned(field_name, value)

        policy_id = self._next_policy_id()
        policy = Policy(
            id=policy_id,
            plan=plan,
            base_rate=base_rate,
            deductible=deductible,
            coverage=coverage,
            liability=liability,
            cover_items=tuple(cover_items),
        )
        self._policies[policy_id] = policy

        logger.info("Policy created", extra={"caller": caller, "policy_id": policy_id})
        self.events.emit(PolicyCreated(policy=policy, creator=caller))
        return policy_id

    async def select_policy(self, subscriber: str, policy_id: int, nominal_premium: int) -> Selection:
        """Bind ``subscriber`` to a policy.

        The subscriber must hold the User role; whoever makes the call is not
        checked against ``subscriber``. Nothing is recorded unless every check and
        the premium conversion succeed.
        """
        async with self._select_lock:
            self._require_policy(policy_id)
            self._authority.require_user(subscriber, "select a policy")

            premium = await self._price_adapter.convert(nominal_premium)
            selection = Selection(
                policy_id=policy_id,
                premium=premium,
                due_date=self._clock() + self._renewal_period,
            )

            self._subscribers.add(subscriber)
            self._selections.setdefault(subscriber, []).append(selection)

        logger.info(
            "Policy selected",
            extra={"subscriber": subscriber, "policy_id": policy_id},
        )
        self.events.emit(
            PolicySelected(
                subscriber=subscriber,
                policy_id=policy_id,
                premium=selection.premium,
                due_date=selection.due_date,
            )
        )
        return selection

    def view_policy(self, policy_id: int) -> Policy:
        self._require_policy(policy_id)
        return self._policies[policy_id]

    def view_all_policies(self) -> List[Policy]:
        return [self._policies[policy_id] for policy_id in range(1, self._policy_count + 1)]

    def get_user_selected_policies(self, subscriber: str) -> SelectionHistory:
        selections = self._selections.get(subscriber)
        if not selections:
            raise NotFoundError("no selections", resource_type="subscriber", resource_id=subscriber)
        return SelectionHistory(
            policy_ids=[selection.policy_id for selection in selections],
            premiums=[selection.premium for selection in selections],
            due_dates=[selection.due_date for selection in selections],
        )

    def selections_of(self, subscriber: str) -> List[Selection]:
        return list(self._selections.get(subscriber, ()))

    def is_subscriber(self, identity: str) -> bool:
        return identity in self._subscribers

    def _next_policy_id(self) -> int:
        # No await between read and write, so ids stay unique on the event loop
        self._policy_count += 1
        return self._policy_count

    def _require_policy(self, policy_id: int) -> None:
        if (
            isinstance(policy_id, bool)
            or not isinstance(policy_id, int)
            or not 1 <= policy_id <= self._policy_count
        ):
            raise NotFoundError("policy does not exist", resource_type="policy", resource_id=policy_id)

    @staticmethod
    def _require_unsigned(field_name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise PolicyValidationError(f"{field_name} must be a non-negative integer, got {value!r}")
