"""Constants for domain model field names"""

from .user_fields import UserFields, UpdateFields

__all__ = [
    "UserFields",
    "UpdateFields",
]
