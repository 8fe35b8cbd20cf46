"""
Login Use Case

Authenticates a user or an institute admin and issues a session token.
"""

import bcrypt

from docshare.app.services.token_service import ISessionTokenIssuer
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.domain.entities import AuditEvent, IdentityKind
from docshare.libs.result import Error, Result, Return

from .dtos import LoginResponse

# Checked when the email is unknown so both failure paths cost one bcrypt round
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for login and session token issuance.

    Business Rules:
    - Unknown email and wrong password fail the same way (INVALID_CREDENTIALS)
    - The token role is the kind the caller logged in as
    """

    def __init__(self, uow: UnitOfWork, token_issuer: ISessionTokenIssuer):
        self.uow = uow
        self.token_issuer = token_issuer

    async def execute(
        self, kind: IdentityKind, email: str, password: str
    ) -> Result[LoginResponse]:
        async with self.uow:
            identity = await self.uow.identities(kind).get_by_email(email)

            if identity is None:
                bcrypt.checkpw(b"dummy_password", _DUMMY_HASH)
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid Credentials"))

            if not bcrypt.checkpw(password.encode(), identity.password_hash.encode()):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid Credentials"))

            if kind == IdentityKind.user:
                audit = AuditEvent(user_id=identity.id, action="login")
            else:
                audit = AuditEvent(institute_id=identity.id, action="login")
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

            token = self.token_issuer.issue(identity.id, kind)
            return Return.ok(LoginResponse(token=token, role=kind))
