"""
Authentication Use Cases

Signup and login for both identity kinds.
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .dtos import LoginResponse, SignupCommand, TokenResponse

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    # DTOs
    "SignupCommand",
    "TokenResponse",
    "LoginResponse",
]
