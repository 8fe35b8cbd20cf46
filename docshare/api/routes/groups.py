from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from docshare.api.error import raise_for_error
from docshare.api.utils.role_auth import require_institute
from docshare.app.services.token_service import SessionClaims
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.app.use_cases.groups import (
    AddGroupMemberUseCase,
    CreateGroupCommand,
    CreateGroupUseCase,
    GroupInfo,
    ListGroupsUseCase,
    RemoveGroupMemberUseCase,
)
from docshare.depends import get_unit_of_work

router = APIRouter(prefix="/groups", tags=["Groups"])

GROUP_ERROR_STATUS = {
    "INVALID_GROUP_NAME": status.HTTP_400_BAD_REQUEST,
    "GROUP_NAME_TAKEN": status.HTTP_400_BAD_REQUEST,
    "USER_NOT_LINKED": status.HTTP_400_BAD_REQUEST,
    "GROUP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class CreateGroupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255, description="Group name")
    member_ids: List[UUID] = Field(
        default_factory=list, alias="memberIds", description="Linked users to add"
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=GroupInfo)
async def create_group(
    request: CreateGroupRequest,
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a recipient group

    Raises:
        - 400 Bad Request: Name taken, or a member is not linked to the institute
    """
    command = CreateGroupCommand(name=request.name, member_ids=request.member_ids)
    result = await CreateGroupUseCase(uow).execute(claims.id, command)
    if result.is_err():
        raise_for_error(result.error, GROUP_ERROR_STATUS)
    return result.value


@router.get("", response_model=List[GroupInfo])
async def list_groups(
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListGroupsUseCase(uow).execute(claims.id)
    if result.is_err():
        raise_for_error(result.error, GROUP_ERROR_STATUS)
    return result.value


@router.post("/{group_id}/members/{user_id}", response_model=GroupInfo)
async def add_group_member(
    group_id: UUID,
    user_id: UUID,
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AddGroupMemberUseCase(uow).execute(claims.id, group_id, user_id)
    if result.is_err():
        raise_for_error(result.error, GROUP_ERROR_STATUS)
    return result.value


@router.delete("/{group_id}/members/{user_id}", response_model=GroupInfo)
async def remove_group_member(
    group_id: UUID,
    user_id: UUID,
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RemoveGroupMemberUseCase(uow).execute(claims.id, group_id, user_id)
    if result.is_err():
        raise_for_error(result.error, GROUP_ERROR_STATUS)
    return result.value
