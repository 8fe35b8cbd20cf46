"""
JWT token issuers (python-jose, HS256)

Both issuers receive their secret at construction; nothing here reads
application config.
"""

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from pydantic import ValidationError

from docshare.app.services.token_service import (
    ISecureLinkIssuer,
    ISessionTokenIssuer,
    LinkClaims,
    SessionClaims,
)
from docshare.domain.entities import IdentityKind

ALGORITHM = "HS256"
SESSION_TOKEN_TYPE = "session"
LINK_TOKEN_TYPE = "document_link"


class JwtSessionTokenIssuer(ISessionTokenIssuer):
    """
    Session tokens carry the identity id and its role tag.

    Payload: {"id", "role", "typ": "session", "iat", "exp"}
    """

    def __init__(self, secret: str, expires_delta: timedelta = timedelta(hours=1)):
        self.secret = secret
        self.expires_delta = expires_delta

    def issue(self, identity_id: UUID, kind: IdentityKind) -> str:
        now = datetime.now(UTC)
        payload = {
            "id": str(identity_id),
            "role": IdentityKind(kind).value,
            "typ": SESSION_TOKEN_TYPE,
            "iat": now,
            "exp": now + self.expires_delta,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[SessionClaims]:
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except JWTError:
            return None
        if payload.get("typ") != SESSION_TOKEN_TYPE:
            return None
        try:
            return SessionClaims(id=payload.get("id"), role=payload.get("role"))
        except ValidationError:
            return None


class JwtSecureLinkIssuer(ISecureLinkIssuer):
    """
    Per-recipient document links.

    Payload: {"document_id", "user_id", "typ": "document_link", "iat", "exp"}
    The validity window starts when the link is issued, not when the
    document was uploaded. Links are never stored, so they cannot be
    revoked before exp.
    """

    def __init__(self, secret: str, base_url: str, api_prefix: str = "/api"):
        self.secret = secret
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix

    def issue(
        self,
        document_id: UUID,
        user_id: UUID,
        expiry_days: int,
        issued_at: Optional[datetime] = None,
    ) -> str:
        if expiry_days <= 0:
            raise ValueError("expiry_days must be positive")
        issued_at = issued_at or datetime.now(UTC)
        payload = {
            "document_id": str(document_id),
            "user_id": str(user_id),
            "typ": LINK_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + timedelta(days=expiry_days),
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[LinkClaims]:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except JWTError:
            return None
        if payload.get("typ") != LINK_TOKEN_TYPE:
            return None
        try:
            return LinkClaims(
                document_id=payload.get("document_id"),
                user_id=payload.get("user_id"),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (KeyError, ValidationError):
            return None

    def build_url(self, token: str) -> str:
        return f"{self.base_url}{self.api_prefix}/documents/shared/{token}"
