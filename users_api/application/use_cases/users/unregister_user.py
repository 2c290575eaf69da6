# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.errors import CredentialsError
from ....domain.sanitizers import sanitize_document
from ....domain.validators import validate_id, validate_password
from ....core.security import verify_password

logger = logging.getLogger(__name__)


class UnregisterUserUseCase:
    """Use case for permanently deleting a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: Any, password: Any) -> None:
        """
        Delete a user after checking the current password

        Args:
            user_id: ID of the user
            password: Current plain text password

        Raises:
            CredentialsError: If the user does not exist or the password is wrong
        """
        validate_id(user_id)
        validate_password(password)

        document = await self.user_repository.find_by_id(user_id)

        # Unknown id and wrong password are reported the same way
        if document is None:
            raise CredentialsError("wrong credentials")

        user = User.from_document(sanitize_document(document))
        if not verify_password(password, user.hashed_password):
            raise CredentialsError("wrong credentials")

        await self.user_repository.delete(user_id)
        logger.info(f"Unregistered user {user_id}")
