# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import DuplicateKeyViolation, UserRepository
from ....domain.models.user import User
from ....domain.errors import ConflictError
from ....domain.validators import (
    validate_name,
    validate_username,
    validate_email,
    validate_password,
)
from ....core.security import hash_password

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, name: Any, username: Any, email: Any, password: Any) -> None:
        """
        Register a new user

        Args:
            name: Display name
            username: Unique username
            email: Unique email address
            password: Plain text password, stored as a bcrypt hash

        Raises:
            InvalidTypeError: If a field is not a string
            InvalidFormatError: If a field breaks a format rule
            ConflictError: If username or email is already taken
        """
        validate_name(name)
        validate_username(username)
        validate_email(email)
        validate_password(password)

        new_user = User(
            id=None,  # Will be set by repository
            name=name,
            username=username,
            email=email,
            hashed_password=hash_password(password),
        )

        # Unique indexes decide conflicts, no lookup beforehand
        try:
            user_id = await self.user_repository.create(new_user.to_document())
        except DuplicateKeyViolation:
            raise ConflictError("user with this username or email already exists")

        logger.info(f"Registered user {user_id}")
