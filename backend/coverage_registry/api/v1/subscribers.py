"""
Subscriber selection history endpoints.
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...ledger import PolicyLedger
from ..deps import get_ledger

router = APIRouter()


class SelectionHistoryResponse(BaseModel):
    subscriber: str
    policy_ids: List[int]
    premiums: List[int]
    due_dates: List[datetime]


@router.get("/{identity}/selections", response_model=SelectionHistoryResponse)
async def get_selected_policies(identity: str, ledger: PolicyLedger = Depends(get_ledger)):
    """Get a subscriber's selections as parallel lists in insertion order"""
    history = ledger.get_user_selected_policies(identity)
    return SelectionHistoryResponse(
        subscriber=identity,
        policy_ids=history.policy_ids,
        premiums=history.premiums,
        due_dates=history.due_dates,
    )
