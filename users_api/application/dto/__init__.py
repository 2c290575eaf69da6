from .auth_dto import (
    UserRegistrationRequest,
    UserAuthenticationRequest,
    UserUnregistrationRequest,
    TokenResponse,
)
from .user_dto import UserResponse

__all__ = [
    "UserRegistrationRequest",
    "UserAuthenticationRequest",
    "UserUnregistrationRequest",
    "TokenResponse",
    "UserResponse",
]
