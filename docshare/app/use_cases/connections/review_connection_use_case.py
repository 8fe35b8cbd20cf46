"""
Approve / Reject Connection Use Cases

An institute decides on a pending join request.
"""

import logging
from uuid import UUID

from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.base import utcnow
from docshare.domain.entities import AuditEvent, ConnectionStatus
from docshare.libs.result import Error, Result, Return

from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class _ReviewPendingConnectionUseCase:
    """
    Moves a pending connection to a final status.

    Business Rules:
    - Only the institute the request targets may decide (caller id is
      the institute id)
    - Only pending records can be decided; anything else is
      PENDING_REQUEST_NOT_FOUND, so deciding twice fails the second time
    - Linked users / connected institutes are read from connection
      records, so the status update is the whole transition
    """

    target_status: ConnectionStatus
    audit_action: str
    success_message: str

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, institute_id: UUID, user_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            connection = await self.uow.connections.get_by_user_and_institute(
                user_id, institute_id
            )
            if connection is None or connection.status != ConnectionStatus.pending:
                return Return.err(
                    Error("PENDING_REQUEST_NOT_FOUND", "Pending request not found.")
                )

            connection.status = self.target_status
            connection.updated_at = utcnow()
            await self.uow.connections.update(connection)

            await self.uow.audit_events.create(
                AuditEvent(institute_id=institute_id, user_id=user_id, action=self.audit_action)
            )
            await self.uow.commit()

            logger.info(
                f"Institute {institute_id} set connection of user {user_id} "
                f"to {self.target_status.value}"
            )
            return Return.ok(MessageResponse(msg=self.success_message))


class ApproveConnectionUseCase(_ReviewPendingConnectionUseCase):
    target_status = ConnectionStatus.approved
    audit_action = "connection_approved"
    success_message = "User approved and linked successfully"


class RejectConnectionUseCase(_ReviewPendingConnectionUseCase):
    target_status = ConnectionStatus.rejected
    audit_action = "connection_rejected"
    success_message = "User request rejected."
