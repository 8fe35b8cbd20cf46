from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from docshare.domain.entities import IdentityKind


class SessionClaims(BaseModel):
    """Verified contents of a session token"""

    id: UUID
    role: IdentityKind


class LinkClaims(BaseModel):
    """Verified contents of a secure document link"""

    document_id: UUID
    user_id: UUID
    expires_at: datetime


class ISessionTokenIssuer(ABC):
    """Issues and verifies signed, expiring session tokens"""

    @abstractmethod
    def issue(self, identity_id: UUID, kind: IdentityKind) -> str:
        pass

    @abstractmethod
    def verify(self, token: str) -> Optional[SessionClaims]:
        """Claims of a valid token, None if missing, malformed or expired"""
        pass


class ISecureLinkIssuer(ABC):
    """Mints per-recipient document links"""

    @abstractmethod
    def issue(
        self,
        document_id: UUID,
        user_id: UUID,
        expiry_days: int,
        issued_at: Optional[datetime] = None,
    ) -> str:
        """Signed token valid for expiry_days from issued_at (default: now)"""
        pass

    @abstractmethod
    def verify(self, token: str) -> Optional[LinkClaims]:
        pass

    @abstractmethod
    def build_url(self, token: str) -> str:
        pass
