import base64
import binascii
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from docshare.app.repositories.audit_event_repository import IAuditEventRepository
from docshare.domain.entities import AuditEvent


def _encode_cursor(event: AuditEvent) -> str:
    raw = f"{event.created_at.isoformat()}|{event.id}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("utf-8")


def _decode_cursor(cursor: str) -> Optional[Tuple[datetime, UUID]]:
    try:
        created_at, event_id = base64.urlsafe_b64decode(cursor).decode("utf-8").split("|")
        return datetime.fromisoformat(created_at), UUID(event_id)
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_by_institute_paginated(
        self, institute_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        Get audit events for an institute, newest first.

        Cursor format: base64 of "<created_at ISO>|<id>" for the last
        returned event. Events sharing a timestamp are ordered by id, so a
        page boundary never skips or repeats one. An unreadable cursor
        restarts from the newest event.
        """
        stmt = select(AuditEvent).where(AuditEvent.institute_id == institute_id)

        position = _decode_cursor(cursor) if cursor else None
        if position is not None:
            created_at, event_id = position
            stmt = stmt.where(
                or_(
                    AuditEvent.created_at < created_at,
                    and_(AuditEvent.created_at == created_at, AuditEvent.id < event_id),
                )
            )

        # One extra row tells us whether another page exists
        stmt = stmt.order_by(AuditEvent.created_at.desc(), AuditEvent.id.desc()).limit(limit + 1)
        result = await self.session.exec(stmt)
        events = list(result.all())

        next_cursor = None
        if len(events) > limit:
            events = events[:limit]
            next_cursor = _encode_cursor(events[-1])

        return events, next_cursor
