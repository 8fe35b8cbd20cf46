from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from docshare.app.repositories.document_repository import IDocumentRepository
from docshare.domain.entities import Document, DocumentRecipient


class DocumentRepository(IDocumentRepository):
    """Document repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, document_id: UUID) -> Optional[Document]:
        """Get document by ID"""
        stmt = select(Document).where(Document.id == document_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, document: Document, recipient_group_ids: List[UUID]) -> Document:
        """Create a document together with its recipient groups"""
        self.session.add(document)
        await self.session.flush()
        for group_id in dict.fromkeys(recipient_group_ids):
            self.session.add(DocumentRecipient(document_id=document.id, group_id=group_id))
        await self.session.flush()
        await self.session.refresh(document)
        return document
