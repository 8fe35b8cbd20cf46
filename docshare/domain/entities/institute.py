"""
Institute Entity

A tenant organization that uploads documents and manages its own groups.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class Institute(SQLModel, table=True):
    """
    Institute entity - an organization users can join.

    Business Rules:
    - Name and admin email are both unique
    - The admin logs in with admin_email
    - Linked users are derived from approved connections
    """

    __tablename__ = "institutes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=255)
    admin_name: Optional[str] = Field(default=None, max_length=255)
    admin_email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
