"""
Role guards

Session tokens carry a role tag; each dashboard area is reserved for one
identity kind.
"""

from fastapi import Depends, status

from docshare.api.error import ClientError
from docshare.app.services.token_service import SessionClaims
from docshare.depends import get_current_identity
from docshare.domain.entities import IdentityKind
from docshare.libs.result import Error


def _require(kind: IdentityKind, label: str):
    async def dependency(claims: SessionClaims = Depends(get_current_identity)) -> SessionClaims:
        if claims.role != kind:
            raise ClientError(
                Error("FORBIDDEN_ROLE", f"Forbidden: {label} access required"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return claims

    return dependency


require_user = _require(IdentityKind.user, "User")
require_institute = _require(IdentityKind.institute, "Institute")
