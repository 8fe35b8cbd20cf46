"""
Request Join Use Case

A user asks to join an institute.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.entities import AuditEvent, Connection, ConnectionStatus
from docshare.libs.result import Error, Result, Return

from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class RequestJoinUseCase:
    """
    Use case for a user requesting to join an institute.

    Business Rules:
    - Institute must exist (INSTITUTE_NOT_FOUND)
    - One connection record per (user, institute):
      approved -> ALREADY_LINKED, pending -> REQUEST_ALREADY_PENDING
    - A rejected record blocks new requests until the institute clears it
      (REQUEST_REJECTED)
    - Two racing requests: the unique index lets exactly one insert win,
      the loser gets REQUEST_ALREADY_PENDING
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, institute_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            institute = await self.uow.institutes.get_by_id(institute_id)
            if institute is None:
                return Return.err(Error("INSTITUTE_NOT_FOUND", "Institute not found"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            existing = await self.uow.connections.get_by_user_and_institute(
                user_id, institute_id
            )
            if existing is not None:
                if existing.status == ConnectionStatus.approved:
                    return Return.err(
                        Error("ALREADY_LINKED", "You are already linked to this institute.")
                    )
                if existing.status == ConnectionStatus.pending:
                    return Return.err(
                        Error(
                            "REQUEST_ALREADY_PENDING",
                            "You already have a pending request for this institute.",
                        )
                    )
                return Return.err(
                    Error(
                        "REQUEST_REJECTED",
                        "Your request to this institute has been previously rejected. "
                        "Please contact the administrator.",
                    )
                )

            try:
                await self.uow.connections.create(
                    Connection(
                        user_id=user_id,
                        institute_id=institute_id,
                        status=ConnectionStatus.pending,
                    )
                )
            except IntegrityError:
                await self.uow.rollback()
                logger.warning(
                    f"Concurrent join request lost the race: user={user_id} institute={institute_id}"
                )
                return Return.err(
                    Error(
                        "REQUEST_ALREADY_PENDING",
                        "You already have a pending request for this institute.",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(institute_id=institute_id, user_id=user_id, action="join_requested")
            )
            await self.uow.commit()

            logger.info(f"User {user_id} requested to join institute {institute_id}")
            return Return.ok(
                MessageResponse(
                    msg=f"Request to join {institute.name} sent successfully. Awaiting approval."
                )
            )
