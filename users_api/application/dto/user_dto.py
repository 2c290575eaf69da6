from typing import List

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    username: str
    email: str
    favorites: List[str] = Field(default_factory=list)
