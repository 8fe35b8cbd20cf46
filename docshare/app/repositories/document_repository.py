from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from docshare.domain.entities import Document


class IDocumentRepository(ABC):
    """Document repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, document_id: UUID) -> Optional[Document]:
        """Get document by ID"""
        pass

    @abstractmethod
    async def create(self, document: Document, recipient_group_ids: List[UUID]) -> Document:
        """Create a document together with its recipient groups"""
        pass
