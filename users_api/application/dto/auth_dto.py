from typing import Any

from pydantic import BaseModel


# Request fields are left untyped: the domain validators own type and
# format checks so that every rule maps to the same error kinds.

class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: Any = None
    username: Any = None
    email: Any = None
    password: Any = None


class UserAuthenticationRequest(BaseModel):
    """DTO for user authentication request"""
    username: Any = None
    password: Any = None


class UserUnregistrationRequest(BaseModel):
    """DTO for user unregistration request"""
    password: Any = None


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str
