import logging
from typing import Optional

import bcrypt
from sqlalchemy.exc import IntegrityError

from docshare.app.services.token_service import ISessionTokenIssuer
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.entities import AuditEvent, IdentityKind, Institute, User
from docshare.libs.result import Error, Result, Return

from .dtos import SignupCommand, TokenResponse

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case - users and institutes

    Business Logic:
    1. Check the identifying email is free (users: email, institutes: admin email)
    2. Institutes only: check the institute name is free
    3. Hash password with bcrypt cost factor 12
    4. Create the identity and a signup AuditEvent, commit
    5. Return a 1-hour session token carrying {id, role}
    """

    def __init__(self, uow: UnitOfWork, token_issuer: ISessionTokenIssuer):
        self.uow = uow
        self.token_issuer = token_issuer

    async def _find_conflict(self, command: SignupCommand) -> Optional[Error]:
        if await self.uow.identities(command.kind).get_by_email(command.email):
            if command.kind == IdentityKind.user:
                return Error("EMAIL_ALREADY_EXISTS", "User already exists")
            return Error("EMAIL_ALREADY_EXISTS", "Institute email already in use")

        if command.kind == IdentityKind.institute:
            if await self.uow.institutes.get_by_name(command.name):
                return Error("INSTITUTE_NAME_TAKEN", "Institute name already in use")
        return None

    async def execute(self, command: SignupCommand) -> Result[TokenResponse]:
        """
        Execute signup use case

        A concurrent signup that inserts between the check and the insert
        surfaces as an IntegrityError and is reported as the same conflict.

        Returns:
            Result[TokenResponse], or Error(EMAIL_ALREADY_EXISTS) /
            Error(INSTITUTE_NAME_TAKEN)
        """
        async with self.uow:
            conflict = await self._find_conflict(command)
            if conflict is not None:
                return Return.err(conflict)

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            ).decode("utf-8")

            try:
                if command.kind == IdentityKind.user:
                    identity = await self.uow.users.create(
                        User(name=command.name, email=command.email, password_hash=password_hash)
                    )
                    audit = AuditEvent(user_id=identity.id, action="signup")
                else:
                    identity = await self.uow.institutes.create(
                        Institute(
                            name=command.name,
                            admin_name=command.admin_name,
                            admin_email=command.email,
                            password_hash=password_hash,
                        )
                    )
                    audit = AuditEvent(institute_id=identity.id, action="signup")
            except IntegrityError:
                await self.uow.rollback()
                logger.warning(
                    f"Concurrent {command.kind.value} signup lost the race: {command.email}"
                )
                conflict = await self._find_conflict(command)
                return Return.err(
                    conflict or Error("EMAIL_ALREADY_EXISTS", "Email already in use")
                )

            audit.event_metadata = {"kind": command.kind.value, "email": command.email}
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"New {command.kind.value} signed up: {identity.id}")
            token = self.token_issuer.issue(identity.id, command.kind)
            return Return.ok(TokenResponse(token=token))
