"""
Get Audit Events Use Case

Retrieves lifecycle audit events for an institute with pagination.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from docshare.app.services.unit_of_work import UnitOfWork
from docshare.libs.result import Error, Result, Return


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for an institute.

    Business Rules:
    - Results are institute-scoped (only events for the caller's institute)
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each event includes action, user email (if a user was involved),
      timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        institute_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        async with self.uow:
            institute = await self.uow.institutes.get_by_id(institute_id)
            if institute is None:
                return Return.err(Error("INSTITUTE_NOT_FOUND", "Institute not found"))

            events, next_cursor = await self.uow.audit_events.get_by_institute_paginated(
                institute_id, limit=limit, cursor=cursor
            )

            emails: Dict[UUID, str] = {}
            user_ids = list({e.user_id for e in events if e.user_id})
            for user in await self.uow.users.get_by_ids(user_ids):
                emails[user.id] = user.email

            events_list = [
                {
                    "action": event.action,
                    "user_email": emails.get(event.user_id),
                    "timestamp": event.created_at.isoformat() + "Z",
                    "metadata": event.event_metadata or {},
                }
                for event in events
            ]

            return Return.ok({"events": events_list, "next_cursor": next_cursor})
