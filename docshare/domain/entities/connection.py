"""
Connection Entity

A user's request to join an institute and its approval state.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import ConnectionStatus


class Connection(SQLModel, table=True):
    """
    Connection entity - join request between a user and an institute.

    Business Rules:
    - (user_id, institute_id) is unique: one record per pair at any time
    - pending -> approved | rejected
    - rejected records are deleted by the institute to allow a new request
    - approved records are deleted when the user leaves
    - Single source of truth for linked users / connected institutes
    """

    __tablename__ = "connections"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    institute_id: UUID = Field(foreign_key="institutes.id", nullable=False, index=True)

    status: ConnectionStatus = Field(default=ConnectionStatus.pending)

    # Timestamps
    request_date: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_connection_user_institute", "user_id", "institute_id", unique=True),
        Index("idx_connection_institute_status", "institute_id", "status"),
    )
