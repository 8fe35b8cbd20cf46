"""
Document Entities

Uploaded document metadata and its recipient groups.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class Document(SQLModel, table=True):
    """
    Document entity - a file an institute shares with groups.

    Business Rules:
    - Immutable after upload
    - expiry_days sets the lifetime of each issued secure link,
      counted from link issuance
    - view_once and watermark are stored as metadata only
    """

    __tablename__ = "documents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    institute_id: UUID = Field(foreign_key="institutes.id", nullable=False, index=True)

    original_file_name: str = Field(max_length=255)
    file_path: str = Field(max_length=1024)

    expiry_days: int = Field(default=7, gt=0)
    view_once: bool = Field(default=False)
    watermark: bool = Field(default=True)

    upload_date: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))


class DocumentRecipient(SQLModel, table=True):
    """Recipient group of a document"""

    __tablename__ = "document_recipients"

    document_id: UUID = Field(foreign_key="documents.id", primary_key=True)
    group_id: UUID = Field(primary_key=True)
