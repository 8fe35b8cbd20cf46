from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from docshare.api.error import ClientError, ServerError
from docshare.app.services.token_service import ISessionTokenIssuer
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    SignupCommand,
    SignupUseCase,
    TokenResponse,
)
from docshare.depends import get_session_token_issuer, get_unit_of_work
from docshare.domain.entities import IdentityKind

router = APIRouter(prefix="/auth", tags=["Authentication"])


class UserSignupRequest(BaseModel):
    """
    User signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Name is required")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="Password (min 6 chars)")


class InstituteSignupRequest(BaseModel):
    """Institute signup HTTP request payload (camelCase keys)"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255, description="Institute name")
    admin_email: EmailStr = Field(..., alias="adminEmail", description="Admin login email")
    password: str = Field(..., min_length=6, description="Password (min 6 chars)")
    admin_name: Optional[str] = Field(None, alias="adminName", max_length=255)


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=1, description="Password")


async def _signup(
    command: SignupCommand, uow: UnitOfWork, token_issuer: ISessionTokenIssuer
) -> TokenResponse:
    use_case = SignupUseCase(uow, token_issuer)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("EMAIL_ALREADY_EXISTS", "INSTITUTE_NAME_TAKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("/user/signup", status_code=status.HTTP_200_OK, response_model=TokenResponse)
async def user_signup(
    request: UserSignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: ISessionTokenIssuer = Depends(get_session_token_issuer),
):
    """
    Register a user

    Returns a 1-hour session token with role=user.

    Raises:
        - 400 Bad Request: Email already registered, or invalid input
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        kind=IdentityKind.user,
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return await _signup(command, uow, token_issuer)


@router.post("/institute/signup", status_code=status.HTTP_200_OK, response_model=TokenResponse)
async def institute_signup(
    request: InstituteSignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: ISessionTokenIssuer = Depends(get_session_token_issuer),
):
    """
    Register an institute and its admin login

    Raises:
        - 400 Bad Request: Admin email or institute name in use, or invalid input
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        kind=IdentityKind.institute,
        name=request.name,
        email=request.admin_email,
        password=request.password,
        admin_name=request.admin_name,
    )
    return await _signup(command, uow, token_issuer)


@router.post("/{role}/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    role: IdentityKind,
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: ISessionTokenIssuer = Depends(get_session_token_issuer),
):
    """
    Login as a user or an institute admin

    Raises:
        - 400 Bad Request: Unknown role or invalid input
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, token_issuer)
    result = await use_case.execute(role, request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value
