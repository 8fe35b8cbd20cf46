"""
Connection read models

Both directions of "who is linked to whom" are computed from approved
connection records.
"""

from typing import List
from uuid import UUID

from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.entities import ConnectionStatus
from docshare.libs.result import Error, Result, Return

from .dtos import ConnectedInstituteInfo, ConnectionRequestInfo, LinkedUserInfo


class ListConnectionRequestsUseCase:
    """Connection records of an institute in one status (pending or rejected)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, institute_id: UUID, status: ConnectionStatus
    ) -> Result[List[ConnectionRequestInfo]]:
        async with self.uow:
            rows = await self.uow.connections.list_by_institute_and_status(
                institute_id, status
            )
            return Return.ok(
                [
                    ConnectionRequestInfo(
                        id=str(connection.id),
                        user=LinkedUserInfo(id=str(user.id), name=user.name, email=user.email),
                        institute_id=str(connection.institute_id),
                        status=connection.status,
                        request_date=connection.request_date,
                    )
                    for connection, user in rows
                ]
            )


class ListLinkedUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, institute_id: UUID) -> Result[List[LinkedUserInfo]]:
        async with self.uow:
            institute = await self.uow.institutes.get_by_id(institute_id)
            if institute is None:
                return Return.err(Error("INSTITUTE_NOT_FOUND", "Institute not found"))

            users = await self.uow.connections.list_linked_users(institute_id)
            return Return.ok(
                [LinkedUserInfo(id=str(u.id), name=u.name, email=u.email) for u in users]
            )


class ListConnectedInstitutesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[ConnectedInstituteInfo]]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            institutes = await self.uow.connections.list_connected_institutes(user_id)
            return Return.ok(
                [
                    ConnectedInstituteInfo(
                        id=str(i.id),
                        name=i.name,
                        admin_name=i.admin_name,
                        admin_email=i.admin_email,
                    )
                    for i in institutes
                ]
            )
