"""
Auth Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- TokenResponse / LoginResponse: Output from use case
"""

from typing import Optional

from pydantic import BaseModel

from docshare.domain.entities import IdentityKind


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent for either kind.

    For institutes, email is the admin email and admin_name is optional.
    """

    kind: IdentityKind
    name: str
    email: str
    password: str
    admin_name: Optional[str] = None


class TokenResponse(BaseModel):
    """Session token issued at signup"""

    token: str


class LoginResponse(BaseModel):
    """Session token issued at login, with the role it carries"""

    token: str
    role: IdentityKind
