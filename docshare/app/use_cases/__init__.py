"""
Use Cases

Organized into domain folders:
- auth/: Signup and login
- connections/: Join request lifecycle
- groups/: Recipient groups
- documents/: Upload and secure links
- audit/: Audit logs
"""

from .auth import LoginUseCase, SignupCommand, SignupUseCase
from .connections import (
    ApproveConnectionUseCase,
    ClearRejectedUseCase,
    LeaveInstituteUseCase,
    ListConnectedInstitutesUseCase,
    ListConnectionRequestsUseCase,
    ListLinkedUsersUseCase,
    RejectConnectionUseCase,
    RequestJoinUseCase,
)
from .groups import (
    AddGroupMemberUseCase,
    CreateGroupUseCase,
    ListGroupsUseCase,
    RemoveGroupMemberUseCase,
)
from .documents import ResolveSharedLinkUseCase, UploadDocumentUseCase
from .audit import GetAuditEventsUseCase

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "LoginUseCase",
    # Connections
    "RequestJoinUseCase",
    "ApproveConnectionUseCase",
    "RejectConnectionUseCase",
    "ClearRejectedUseCase",
    "LeaveInstituteUseCase",
    "ListConnectionRequestsUseCase",
    "ListLinkedUsersUseCase",
    "ListConnectedInstitutesUseCase",
    # Groups
    "CreateGroupUseCase",
    "ListGroupsUseCase",
    "AddGroupMemberUseCase",
    "RemoveGroupMemberUseCase",
    # Documents
    "UploadDocumentUseCase",
    "ResolveSharedLinkUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
