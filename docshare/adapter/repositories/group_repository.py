from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from docshare.app.repositories.group_repository import IGroupRepository
from docshare.domain.entities import Group, GroupMember


class GroupRepository(IGroupRepository):
    """Group repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        """Get group by ID"""
        stmt = select(Group).where(Group.id == group_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_institute_and_name(
        self, institute_id: UUID, name: str
    ) -> Optional[Group]:
        stmt = select(Group).where(Group.institute_id == institute_id, Group.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_institute(self, institute_id: UUID) -> List[Group]:
        stmt = (
            select(Group)
            .where(Group.institute_id == institute_id)
            .order_by(Group.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, group: Group) -> Group:
        """Create a new group"""
        self.session.add(group)
        await self.session.flush()
        await self.session.refresh(group)
        return group

    async def get_member_ids(self, group_id: UUID) -> List[UUID]:
        stmt = (
            select(GroupMember.user_id)
            .where(GroupMember.group_id == group_id)
            .order_by(GroupMember.added_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def add_member(self, group_id: UUID, user_id: UUID) -> None:
        existing = await self.session.get(GroupMember, (group_id, user_id))
        if existing is not None:
            return
        self.session.add(GroupMember(group_id=group_id, user_id=user_id))
        await self.session.flush()

    async def remove_member(self, group_id: UUID, user_id: UUID) -> None:
        stmt = delete(GroupMember).where(
            GroupMember.group_id == group_id, GroupMember.user_id == user_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_user_from_institute_groups(
        self, institute_id: UUID, user_id: UUID
    ) -> int:
        group_ids = select(Group.id).where(Group.institute_id == institute_id)
        stmt = delete(GroupMember).where(
            GroupMember.user_id == user_id, GroupMember.group_id.in_(group_ids)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def get_existing_ids(
        self, group_ids: Iterable[UUID], institute_id: Optional[UUID] = None
    ) -> List[UUID]:
        group_ids = list(group_ids)
        if not group_ids:
            return []
        stmt = select(Group.id).where(Group.id.in_(group_ids))
        if institute_id is not None:
            stmt = stmt.where(Group.institute_id == institute_id)
        result = await self.session.exec(stmt)
        return list(result.all())
