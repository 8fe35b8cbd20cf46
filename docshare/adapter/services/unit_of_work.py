from sqlmodel.ext.asyncio.session import AsyncSession

from docshare.adapter.repositories.audit_event_repository import AuditEventRepository
from docshare.adapter.repositories.connection_repository import ConnectionRepository
from docshare.adapter.repositories.document_repository import DocumentRepository
from docshare.adapter.repositories.group_repository import GroupRepository
from docshare.adapter.repositories.institute_repository import InstituteRepository
from docshare.adapter.repositories.user_repository import UserRepository
from docshare.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.institutes = InstituteRepository(self.session)
        self.connections = ConnectionRepository(self.session)
        self.groups = GroupRepository(self.session)
        self.documents = DocumentRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
