from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from docshare.app.repositories.institute_repository import IInstituteRepository
from docshare.domain.entities import Institute


class InstituteRepository(IInstituteRepository):
    """Institute repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Institute]:
        """Get institute by admin email"""
        stmt = select(Institute).where(Institute.admin_email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, institute_id: UUID) -> Optional[Institute]:
        """Get institute by ID"""
        stmt = select(Institute).where(Institute.id == institute_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Institute]:
        stmt = select(Institute).where(Institute.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, institute: Institute) -> Institute:
        """Create a new institute"""
        self.session.add(institute)
        await self.session.flush()
        await self.session.refresh(institute)
        return institute
