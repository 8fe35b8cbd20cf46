from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from docshare.domain.entities import Connection, ConnectionStatus, Institute, User


class IConnectionRepository(ABC):
    """Connection repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_institute(
        self, user_id: UUID, institute_id: UUID
    ) -> Optional[Connection]:
        """Get the connection record for a (user, institute) pair"""
        pass

    @abstractmethod
    async def create(self, connection: Connection) -> Connection:
        """Create a new connection, raises IntegrityError on a duplicate pair"""
        pass

    @abstractmethod
    async def update(self, connection: Connection) -> Connection:
        """Update existing connection"""
        pass

    @abstractmethod
    async def delete(self, connection: Connection) -> None:
        """Delete a connection record"""
        pass

    @abstractmethod
    async def list_by_institute_and_status(
        self, institute_id: UUID, status: ConnectionStatus
    ) -> List[Tuple[Connection, User]]:
        """Connections of an institute in a status, with the requesting user"""
        pass

    @abstractmethod
    async def list_linked_users(self, institute_id: UUID) -> List[User]:
        """Users with an approved connection to the institute"""
        pass

    @abstractmethod
    async def list_connected_institutes(self, user_id: UUID) -> List[Institute]:
        """Institutes the user has an approved connection to"""
        pass
