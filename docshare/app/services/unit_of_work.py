from abc import ABC, abstractmethod

from docshare.app.repositories.audit_event_repository import IAuditEventRepository
from docshare.app.repositories.connection_repository import IConnectionRepository
from docshare.app.repositories.document_repository import IDocumentRepository
from docshare.app.repositories.group_repository import IGroupRepository
from docshare.app.repositories.identity_repository import IIdentityRepository
from docshare.app.repositories.institute_repository import IInstituteRepository
from docshare.app.repositories.user_repository import IUserRepository
from docshare.domain.entities import IdentityKind


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    institutes: IInstituteRepository
    connections: IConnectionRepository
    groups: IGroupRepository
    documents: IDocumentRepository
    audit_events: IAuditEventRepository

    def identities(self, kind: IdentityKind) -> IIdentityRepository:
        """Repository holding identities of the given kind"""
        return {
            IdentityKind.user: self.users,
            IdentityKind.institute: self.institutes,
        }[kind]

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
