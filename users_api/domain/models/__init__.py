from .user import User
from .user_update import UserUpdate

__all__ = ["User", "UserUpdate"]
