from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DuplicateKeyViolation(Exception):
    """Raised by a repository when a write breaks a unique index"""


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def create(self, document: Dict[str, Any]) -> str:
        """Insert a user document and return its new ID"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        """Find user document by username"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Find user document by ID"""
        pass

    @abstractmethod
    async def update(self, user_id: str, fields: Dict[str, Any]) -> bool:
        """Set fields on a user; returns False if no user matched"""
        pass

    @abstractmethod
    async def replace_favorites(self, user_id: str, favorites: List[str]) -> bool:
        """Replace the favorites list; returns False if no user matched"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete a user; returns False if no user matched"""
        pass
