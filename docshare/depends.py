from datetime import timedelta
from typing import Optional

from fastapi import Depends, Header, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from docshare.adapter.services.jwt_tokens import JwtSecureLinkIssuer, JwtSessionTokenIssuer
from docshare.adapter.services.local_file_storage import LocalFileStorage
from docshare.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from docshare.api.error import ClientError
from docshare.app.services.file_storage import IFileStorage
from docshare.app.services.token_service import (
    ISecureLinkIssuer,
    ISessionTokenIssuer,
    SessionClaims,
)
from docshare.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_token_issuer() -> ISessionTokenIssuer:
    return JwtSessionTokenIssuer(
        ApplicationConfig.JWT_SECRET,
        timedelta(minutes=ApplicationConfig.SESSION_TOKEN_EXPIRE_MINUTES),
    )


def get_link_issuer() -> ISecureLinkIssuer:
    return JwtSecureLinkIssuer(
        ApplicationConfig.LINK_SECRET,
        ApplicationConfig.LINK_BASE_URL,
        ApplicationConfig.API_PREFIX,
    )


def get_file_storage() -> IFileStorage:
    return LocalFileStorage(ApplicationConfig.UPLOAD_DIR)


async def get_current_identity(
    x_auth_token: Optional[str] = Header(None),
    token_issuer: ISessionTokenIssuer = Depends(get_session_token_issuer),
) -> SessionClaims:
    """
    Dependency to verify the session token from the x-auth-token header.

    Returns:
        SessionClaims with the identity id and role

    Raises:
        ClientError: 401 if the token is missing, malformed or expired
    """
    if not x_auth_token:
        raise ClientError(
            Error("NO_TOKEN", "No token, authorization denied"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    claims = token_issuer.verify(x_auth_token)
    if claims is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Token is not valid"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return claims
