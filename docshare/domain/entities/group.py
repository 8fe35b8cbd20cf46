"""
Group Entities

Named sets of an institute's users, used as document recipients.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Group(SQLModel, table=True):
    """
    Group entity - belongs to exactly one institute.

    Business Rules:
    - Name unique within the institute
    - Members must be linked users of the institute
    """

    __tablename__ = "groups"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    institute_id: UUID = Field(foreign_key="institutes.id", nullable=False, index=True)
    name: str = Field(max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_group_institute_name", "institute_id", "name", unique=True),
    )


class GroupMember(SQLModel, table=True):
    """Membership of a user in a group (set semantics)"""

    __tablename__ = "group_members"

    group_id: UUID = Field(foreign_key="groups.id", primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", primary_key=True, index=True)

    added_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
