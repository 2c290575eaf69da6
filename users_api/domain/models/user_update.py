from dataclasses import dataclass
from typing import Dict, List, Optional

from ..constants import UserFields


@dataclass(frozen=True)
class UserUpdate:
    """
    Validated set of changes for a user.

    Either ``favorites`` is set (wholesale replacement, no password needed)
    or ``password`` is set together with at least one ``new_*`` field.
    """
    new_name: Optional[str] = None
    new_username: Optional[str] = None
    new_email: Optional[str] = None
    new_password: Optional[str] = None
    password: Optional[str] = None
    favorites: Optional[List[str]] = None

    @property
    def is_favorites_update(self) -> bool:
        return self.favorites is not None

    def profile_changes(self) -> Dict[str, str]:
        """Plain field changes keyed by storage field name (new password excluded)"""
        changes = {
            UserFields.NAME: self.new_name,
            UserFields.USERNAME: self.new_username,
            UserFields.EMAIL: self.new_email,
        }
        return {key: value for key, value in changes.items() if value}
