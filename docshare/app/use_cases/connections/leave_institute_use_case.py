"""
Leave Institute Use Case

A linked user disconnects from an institute.
"""

import logging
from uuid import UUID

from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.entities import AuditEvent, ConnectionStatus
from docshare.libs.result import Result, Return

from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class LeaveInstituteUseCase:
    """
    Use case for a user leaving an institute.

    Business Rules:
    - Idempotent: leaving an institute you are not linked to succeeds
    - The user is dropped from every group of the institute first,
      then the approved connection is deleted; both in one transaction
    - Pending and rejected records are left alone
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, institute_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            removed_from_groups = await self.uow.groups.remove_user_from_institute_groups(
                institute_id, user_id
            )

            connection = await self.uow.connections.get_by_user_and_institute(
                user_id, institute_id
            )
            left = connection is not None and connection.status == ConnectionStatus.approved
            if left:
                await self.uow.connections.delete(connection)

            if left or removed_from_groups:
                await self.uow.audit_events.create(
                    AuditEvent(
                        institute_id=institute_id,
                        user_id=user_id,
                        action="institute_left",
                        event_metadata={"groups_removed": removed_from_groups},
                    )
                )
            await self.uow.commit()

            if left:
                logger.info(f"User {user_id} left institute {institute_id}")
            return Return.ok(MessageResponse(msg="Successfully left the institute."))
