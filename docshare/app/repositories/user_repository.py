from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from docshare.app.repositories.identity_repository import IIdentityRepository
from docshare.domain.entities import User


class IUserRepository(IIdentityRepository):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        """Get users by IDs, unknown IDs are skipped"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass
