"""
Policy ledger API endpoints.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from ...core.auth import get_caller_identity
from ...ledger import PolicyLedger
from ..deps import get_ledger

logger = logging.getLogger(__name__)

router = APIRouter()


class PolicyCreateRequest(BaseModel):
    plan: str = Field(..., min_length=1)
    base_rate: str = Field(..., description="Display value of the base premium rate")
    deductible: int = Field(..., ge=0)
    coverage: int = Field(..., ge=0)
    liability: int = Field(..., ge=0)
    cover_items: List[str] = Field(default_factory=list)


class PolicyCreateResponse(BaseModel):
    policy_id: int


class PolicyResponse(BaseModel):
    id: int
    plan: str
    base_rate: str
    deductible: int
    coverage: int
    liability: int
    cover_items: List[str]

    model_config = {
        "from_attributes": True,
    }


class SelectionRequest(BaseModel):
    subscriber: str = Field(..., min_length=1)
    nominal_premium: int = Field(..., ge=0, description="Premium in the source unit")


class SelectionResponse(BaseModel):
    subscriber: str
    policy_id: int
    premium: int
    due_date: datetime


@router.post("", response_model=PolicyCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_policy(
    body: PolicyCreateRequest,
    caller: str = Depends(get_caller_identity),
    ledger: PolicyLedger = Depends(get_ledger),
):
    """Define a new policy product (administrators only)"""
    policy_id = ledger.create_policy(
        caller,
        plan=body.plan,
        base_rate=body.base_rate,
        deductible=body.deductible,
        coverage=body.coverage,
        liability=body.liability,
        cover_items=body.cover_items,
    )
    return PolicyCreateResponse(policy_id=policy_id)


@router.get("", response_model=List[PolicyResponse])
async def list_policies(ledger: PolicyLedger = Depends(get_ledger)):
    """List every policy product ordered by id"""
    return [policy.to_dict() for policy in ledger.view_all_policies()]


@router.get("/{policy_id}", response_model=PolicyResponse)
async def get_policy(policy_id: int, ledger: PolicyLedger = Depends(get_ledger)):
    """Get a single policy product"""
    return ledger.view_policy(policy_id).to_dict()


@router.post(
    "/{policy_id}/selections",
    response_model=SelectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def select_policy(
    policy_id: int,
    body: SelectionRequest,
    caller: str = Depends(get_caller_identity),
    ledger: PolicyLedger = Depends(get_ledger),
):
    """Record a selection of this policy for a subscriber holding the user role.

    The caller may act on behalf of any such subscriber.
    """
    logger.info(
        "Selection requested",
        extra={"caller": caller, "subscriber": body.subscriber, "policy_id": policy_id},
    )
    selection = await ledger.select_policy(body.subscriber, policy_id, body.nominal_premium)
    return SelectionResponse(
        subscriber=body.subscriber,
        policy_id=selection.policy_id,
        premium=selection.premium,
        due_date=selection.due_date,
    )
