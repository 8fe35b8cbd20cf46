from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from docshare.domain.entities import Institute, User

Identity = Union[User, Institute]


class IIdentityRepository(ABC):
    """
    Shared shape of the two identity stores.

    Users and institutes authenticate the same way but are stored apart;
    the unit of work maps an IdentityKind to one of these.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Identity]:
        """Get identity by its login email"""
        pass

    @abstractmethod
    async def get_by_id(self, identity_id: UUID) -> Optional[Identity]:
        """Get identity by ID"""
        pass

    @abstractmethod
    async def create(self, identity: Identity) -> Identity:
        """Create a new identity"""
        pass
