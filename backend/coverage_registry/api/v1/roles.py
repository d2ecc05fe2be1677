"""
Role authority API endpoints.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from ...access import RoleAuthority
from ...core.auth import get_caller_identity
from ..deps import get_authority

router = APIRouter()


class RoleGrantRequest(BaseModel):
    identity: str = Field(..., min_length=1, description="Identity receiving the role")


class RoleRecordResponse(BaseModel):
    identity: str
    is_admin: bool
    is_user: bool

    model_config = {
        "from_attributes": True,
    }


@router.get("/{identity}", response_model=RoleRecordResponse)
async def get_roles(identity: str, authority: RoleAuthority = Depends(get_authority)):
    """Get the role flags held by an identity"""
    return authority.roles_of(identity)


@router.post("/admins", response_model=RoleRecordResponse, status_code=status.HTTP_201_CREATED)
async def grant_admin(
    body: RoleGrantRequest,
    caller: str = Depends(get_caller_identity),
    authority: RoleAuthority = Depends(get_authority),
):
    """Grant the administrator role (administrators only)"""
    authority.add_admin(caller, body.identity)
    return authority.roles_of(body.identity)


@router.post("/users", response_model=RoleRecordResponse, status_code=status.HTTP_201_CREATED)
async def grant_user(
    body: RoleGrantRequest,
    caller: str = Depends(get_caller_identity),
    authority: RoleAuthority = Depends(get_authority),
):
    """Grant the user role (administrators only)"""
    authority.add_user(caller, body.identity)
    return authority.roles_of(body.identity)
