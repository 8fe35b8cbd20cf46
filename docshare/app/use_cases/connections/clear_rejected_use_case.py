from uuid import UUID

from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.entities import AuditEvent, ConnectionStatus
from docshare.libs.result import Error, Result, Return

from .dtos import MessageResponse


class ClearRejectedUseCase:
    """
    Deletes a rejected connection so the user may request again.

    The rejection itself stays in the audit log.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, institute_id: UUID, user_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            connection = await self.uow.connections.get_by_user_and_institute(
                user_id, institute_id
            )
            if connection is None or connection.status != ConnectionStatus.rejected:
                return Return.err(
                    Error("REJECTED_RECORD_NOT_FOUND", "Rejected record not found.")
                )

            await self.uow.connections.delete(connection)
            await self.uow.audit_events.create(
                AuditEvent(institute_id=institute_id, user_id=user_id, action="rejected_cleared")
            )
            await self.uow.commit()

            return Return.ok(
                MessageResponse(
                    msg="Rejected record deleted. User is now allowed to submit a new request."
                )
            )
