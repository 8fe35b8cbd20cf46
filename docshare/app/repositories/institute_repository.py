from abc import abstractmethod
from typing import Optional
from uuid import UUID

from docshare.app.repositories.identity_repository import IIdentityRepository
from docshare.domain.entities import Institute


class IInstituteRepository(IIdentityRepository):
    """Institute repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Institute]:
        """Get institute by admin email"""
        pass

    @abstractmethod
    async def get_by_id(self, institute_id: UUID) -> Optional[Institute]:
        """Get institute by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Institute]:
        """Get institute by its unique name"""
        pass

    @abstractmethod
    async def create(self, institute: Institute) -> Institute:
        """Create a new institute"""
        pass
