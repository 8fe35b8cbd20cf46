from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from docshare.domain.entities import Group


class IGroupRepository(ABC):
    """Group repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        """Get group by ID"""
        pass

    @abstractmethod
    async def get_by_institute_and_name(
        self, institute_id: UUID, name: str
    ) -> Optional[Group]:
        """Get group of an institute by name"""
        pass

    @abstractmethod
    async def list_by_institute(self, institute_id: UUID) -> List[Group]:
        """Get all groups of an institute"""
        pass

    @abstractmethod
    async def create(self, group: Group) -> Group:
        """Create a new group"""
        pass

    @abstractmethod
    async def get_member_ids(self, group_id: UUID) -> List[UUID]:
        """Member user IDs of a group, in the order they were added"""
        pass

    @abstractmethod
    async def add_member(self, group_id: UUID, user_id: UUID) -> None:
        """Add a user to a group, no-op if already a member"""
        pass

    @abstractmethod
    async def remove_member(self, group_id: UUID, user_id: UUID) -> None:
        """Remove a user from a group, no-op if not a member"""
        pass

    @abstractmethod
    async def remove_user_from_institute_groups(
        self, institute_id: UUID, user_id: UUID
    ) -> int:
        """Remove a user from every group of an institute, returns rows removed"""
        pass

    @abstractmethod
    async def get_existing_ids(
        self, group_ids: Iterable[UUID], institute_id: Optional[UUID] = None
    ) -> List[UUID]:
        """Subset of group_ids that exist (optionally within one institute)"""
        pass
