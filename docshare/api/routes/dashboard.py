"""
Dashboard API Routes

User area: connected institutes, join and leave.
Institute area: linked users, pending/rejected requests, decisions, audit log.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from docshare.api.error import raise_for_error
from docshare.api.utils.role_auth import require_institute, require_user
from docshare.app.services.token_service import SessionClaims
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.app.use_cases.audit import GetAuditEventsUseCase
from docshare.app.use_cases.connections import (
    ApproveConnectionUseCase,
    ClearRejectedUseCase,
    ConnectedInstituteInfo,
    ConnectionRequestInfo,
    LeaveInstituteUseCase,
    LinkedUserInfo,
    ListConnectedInstitutesUseCase,
    ListConnectionRequestsUseCase,
    ListLinkedUsersUseCase,
    MessageResponse,
    RejectConnectionUseCase,
    RequestJoinUseCase,
)
from docshare.depends import get_unit_of_work
from docshare.domain.entities import ConnectionStatus

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

CONNECTION_ERROR_STATUS = {
    "INSTITUTE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ALREADY_LINKED": status.HTTP_400_BAD_REQUEST,
    "REQUEST_ALREADY_PENDING": status.HTTP_400_BAD_REQUEST,
    "REQUEST_REJECTED": status.HTTP_403_FORBIDDEN,
    "PENDING_REQUEST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "REJECTED_RECORD_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


# ============================================================================
# User routes
# ============================================================================


@router.get("/user/institutes", response_model=List[ConnectedInstituteInfo])
async def get_connected_institutes(
    claims: SessionClaims = Depends(require_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Institutes the caller is linked to"""
    result = await ListConnectedInstitutesUseCase(uow).execute(claims.id)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


@router.post("/user/join/{institute_id}", response_model=MessageResponse)
async def request_join(
    institute_id: UUID,
    claims: SessionClaims = Depends(require_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request to join an institute

    Raises:
        - 400 Bad Request: Already linked, or a request is already pending
        - 403 Forbidden: A previous request was rejected and not cleared
        - 404 Not Found: Institute not found
    """
    result = await RequestJoinUseCase(uow).execute(claims.id, institute_id)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


@router.post("/user/leave/{institute_id}", response_model=MessageResponse)
async def leave_institute(
    institute_id: UUID,
    claims: SessionClaims = Depends(require_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Leave an institute (succeeds even if not linked)"""
    result = await LeaveInstituteUseCase(uow).execute(claims.id, institute_id)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


# ============================================================================
# Institute routes
# ============================================================================


@router.get("/institute/linked-users", response_model=List[LinkedUserInfo])
async def get_linked_users(
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListLinkedUsersUseCase(uow).execute(claims.id)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


@router.get("/institute/pending", response_model=List[ConnectionRequestInfo])
async def get_pending_requests(
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListConnectionRequestsUseCase(uow).execute(
        claims.id, ConnectionStatus.pending
    )
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


@router.get("/institute/rejected", response_model=List[ConnectionRequestInfo])
async def get_rejected_requests(
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListConnectionRequestsUseCase(uow).execute(
        claims.id, ConnectionStatus.rejected
    )
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


@router.put("/institute/approve/{user_id}", response_model=MessageResponse)
async def approve_request(
    user_id: UUID,
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve a pending request

    Raises:
        - 404 Not Found: No pending request from this user
    """
    result = await ApproveConnectionUseCase(uow).execute(claims.id, user_id)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


@router.put("/institute/reject/{user_id}", response_model=MessageResponse)
async def reject_request(
    user_id: UUID,
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reject a pending request

    Raises:
        - 404 Not Found: No pending request from this user
    """
    result = await RejectConnectionUseCase(uow).execute(claims.id, user_id)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


@router.delete("/institute/rejected/{user_id}", response_model=MessageResponse)
async def clear_rejected_request(
    user_id: UUID,
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a rejected request so the user may apply again

    Raises:
        - 404 Not Found: No rejected request from this user
    """
    result = await ClearRejectedUseCase(uow).execute(claims.id, user_id)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value


class AuditEventResponse(BaseModel):
    """Single audit event in response"""

    action: str
    user_email: Optional[str]
    timestamp: str
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    events: List[AuditEventResponse]
    next_cursor: Optional[str]


@router.get("/institute/audit-events", response_model=AuditEventsResponse)
async def get_audit_events(
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Lifecycle audit events of the caller's institute, newest first

    Returns:
        - events: List of audit events
        - next_cursor: Cursor for next page (null if no more events)
    """
    result = await GetAuditEventsUseCase(uow).execute(claims.id, limit=limit, cursor=cursor)
    if result.is_err():
        raise_for_error(result.error, CONNECTION_ERROR_STATUS)
    return result.value
