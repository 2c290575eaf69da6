# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.errors import CredentialsError
from ....domain.sanitizers import sanitize_document
from ....domain.validators import validate_username, validate_password
from ....core.security import verify_password

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Use case for checking a username and password pair"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, username: Any, password: Any) -> str:
        """
        Authenticate a user

        Args:
            username: Username to look up
            password: Plain text password to verify

        Returns:
            ID of the authenticated user

        Raises:
            CredentialsError: If the user does not exist or the password is wrong
        """
        validate_username(username)
        validate_password(password)

        document = await self.user_repository.find_by_username(username)

        # Same error for unknown username and wrong password
        if document is None:
            logger.warning("Authentication failed: unknown username")
            raise CredentialsError("wrong credentials")

        user = User.from_document(sanitize_document(document))
        if not verify_password(password, user.hashed_password):
            logger.warning(f"Authentication failed for user {user.id}: wrong password")
            raise CredentialsError("wrong credentials")

        return user.id
