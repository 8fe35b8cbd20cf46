from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from docshare.app.repositories.connection_repository import IConnectionRepository
from docshare.domain.entities import Connection, ConnectionStatus, Institute, User


class ConnectionRepository(IConnectionRepository):
    """Connection repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_institute(
        self, user_id: UUID, institute_id: UUID
    ) -> Optional[Connection]:
        stmt = select(Connection).where(
            Connection.user_id == user_id, Connection.institute_id == institute_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, connection: Connection) -> Connection:
        """Create a new connection"""
        self.session.add(connection)
        await self.session.flush()
        await self.session.refresh(connection)
        return connection

    async def update(self, connection: Connection) -> Connection:
        """Update existing connection"""
        self.session.add(connection)
        await self.session.flush()
        await self.session.refresh(connection)
        return connection

    async def delete(self, connection: Connection) -> None:
        await self.session.delete(connection)
        await self.session.flush()

    async def list_by_institute_and_status(
        self, institute_id: UUID, status: ConnectionStatus
    ) -> List[Tuple[Connection, User]]:
        stmt = (
            select(Connection, User)
            .join(User, User.id == Connection.user_id)
            .where(
                Connection.institute_id == institute_id,
                Connection.status == status,
            )
            .order_by(Connection.request_date)
        )
        result = await self.session.exec(stmt)
        return [(connection, user) for connection, user in result.all()]

    async def list_linked_users(self, institute_id: UUID) -> List[User]:
        stmt = (
            select(User)
            .join(Connection, Connection.user_id == User.id)
            .where(
                Connection.institute_id == institute_id,
                Connection.status == ConnectionStatus.approved,
            )
            .order_by(User.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_connected_institutes(self, user_id: UUID) -> List[Institute]:
        stmt = (
            select(Institute)
            .join(Connection, Connection.institute_id == Institute.id)
            .where(
                Connection.user_id == user_id,
                Connection.status == ConnectionStatus.approved,
            )
            .order_by(Institute.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
