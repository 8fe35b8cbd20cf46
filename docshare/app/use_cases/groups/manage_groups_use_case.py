"""
Group management use cases

Institutes build named sets of their linked users to address documents to.
"""

from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.entities import AuditEvent, ConnectionStatus, Group
from docshare.libs.result import Error, Result, Return

from .dtos import CreateGroupCommand, GroupInfo


async def _is_linked(uow: UnitOfWork, institute_id: UUID, user_id: UUID) -> bool:
    connection = await uow.connections.get_by_user_and_institute(user_id, institute_id)
    return connection is not None and connection.status == ConnectionStatus.approved


async def _to_info(uow: UnitOfWork, group: Group) -> GroupInfo:
    member_ids = await uow.groups.get_member_ids(group.id)
    return GroupInfo(
        id=str(group.id),
        name=group.name,
        member_ids=[str(m) for m in member_ids],
        created_at=group.created_at,
    )


def _user_not_linked(user_id: UUID) -> Error:
    return Error("USER_NOT_LINKED", f"User {user_id} is not linked to this institute")


class CreateGroupUseCase:
    """
    Business Rules:
    - Group name unique within the institute (GROUP_NAME_TAKEN)
    - Every initial member must be a linked user (USER_NOT_LINKED)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, institute_id: UUID, command: CreateGroupCommand) -> Result[GroupInfo]:
        name = command.name.strip()
        if not name:
            return Return.err(Error("INVALID_GROUP_NAME", "Group name is required"))

        async with self.uow:
            if await self.uow.groups.get_by_institute_and_name(institute_id, name):
                return Return.err(Error("GROUP_NAME_TAKEN", f"Group {name!r} already exists"))

            member_ids = list(dict.fromkeys(command.member_ids))
            for user_id in member_ids:
                if not await _is_linked(self.uow, institute_id, user_id):
                    return Return.err(_user_not_linked(user_id))

            try:
                group = await self.uow.groups.create(Group(institute_id=institute_id, name=name))
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(Error("GROUP_NAME_TAKEN", f"Group {name!r} already exists"))

            for user_id in member_ids:
                await self.uow.groups.add_member(group.id, user_id)

            await self.uow.audit_events.create(
                AuditEvent(
                    institute_id=institute_id,
                    action="group_created",
                    event_metadata={"group_id": str(group.id), "members": len(member_ids)},
                )
            )
            await self.uow.commit()

            return Return.ok(await _to_info(self.uow, group))


class ListGroupsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, institute_id: UUID) -> Result[List[GroupInfo]]:
        async with self.uow:
            groups = await self.uow.groups.list_by_institute(institute_id)
            return Return.ok([await _to_info(self.uow, g) for g in groups])


class AddGroupMemberUseCase:
    """Adds a linked user to one of the institute's groups (idempotent)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, institute_id: UUID, group_id: UUID, user_id: UUID) -> Result[GroupInfo]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None or group.institute_id != institute_id:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            if not await _is_linked(self.uow, institute_id, user_id):
                return Return.err(_user_not_linked(user_id))

            await self.uow.groups.add_member(group_id, user_id)
            await self.uow.commit()

            return Return.ok(await _to_info(self.uow, group))


class RemoveGroupMemberUseCase:
    """Removes a user from one of the institute's groups (idempotent)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, institute_id: UUID, group_id: UUID, user_id: UUID) -> Result[GroupInfo]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None or group.institute_id != institute_id:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            await self.uow.groups.remove_member(group_id, user_id)
            await self.uow.commit()

            return Return.ok(await _to_info(self.uow, group))
