from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants import UserFields


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    username: str
    email: str
    hashed_password: str
    favorites: List[str] = field(default_factory=list)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "User":
        """Build a User from a sanitized storage document"""
        return cls(
            id=document.get(UserFields.ID),
            name=document.get(UserFields.NAME, ""),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            favorites=list(document.get(UserFields.FAVORITES) or []),
        )

    def to_document(self) -> Dict[str, Any]:
        """Storage representation, without the identifier"""
        return {
            UserFields.NAME: self.name,
            UserFields.USERNAME: self.username,
            UserFields.EMAIL: self.email,
            UserFields.PASSWORD: self.hashed_password,
            UserFields.FAVORITES: list(self.favorites),
        }
