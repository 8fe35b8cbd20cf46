"""
Connection Use Cases

Join request lifecycle between users and institutes:
absent -> pending -> approved | rejected, rejected -> absent (cleared),
approved -> absent (left).
"""

from .request_join_use_case import RequestJoinUseCase
from .review_connection_use_case import ApproveConnectionUseCase, RejectConnectionUseCase
from .clear_rejected_use_case import ClearRejectedUseCase
from .leave_institute_use_case import LeaveInstituteUseCase
from .list_connections_use_case import (
    ListConnectedInstitutesUseCase,
    ListConnectionRequestsUseCase,
    ListLinkedUsersUseCase,
)
from .dtos import (
    ConnectedInstituteInfo,
    ConnectionRequestInfo,
    LinkedUserInfo,
    MessageResponse,
)

__all__ = [
    # Use Cases
    "RequestJoinUseCase",
    "ApproveConnectionUseCase",
    "RejectConnectionUseCase",
    "ClearRejectedUseCase",
    "LeaveInstituteUseCase",
    "ListConnectionRequestsUseCase",
    "ListLinkedUsersUseCase",
    "ListConnectedInstitutesUseCase",
    # DTOs
    "MessageResponse",
    "ConnectedInstituteInfo",
    "ConnectionRequestInfo",
    "LinkedUserInfo",
]
