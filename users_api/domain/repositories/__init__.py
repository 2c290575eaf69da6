from .user_repository import DuplicateKeyViolation, UserRepository

__all__ = ["DuplicateKeyViolation", "UserRepository"]
