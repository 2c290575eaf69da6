# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import DuplicateKeyViolation, UserRepository
from ....domain.models.user import User
from ....domain.models.user_update import UserUpdate
from ....domain.constants import UserFields
from ....domain.errors import ConflictError, CredentialsError, NotFoundError
from ....domain.sanitizers import sanitize_document
from ....domain.validators import validate_id, validate_update_payload
from ....core.security import hash_password, verify_password

logger = logging.getLogger(__name__)


class ModifyUserUseCase:
    """Use case for updating profile fields or favorites of a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: Any, data: Any) -> None:
        """
        Modify a user

        Args:
            user_id: ID of the user
            data: Update payload, either {favorites} or {password, newName?,
                newUsername?, newEmail?, newPassword?}

        Raises:
            NotFoundError: If no user has this ID
            CredentialsError: If the confirmation password is wrong
            ConflictError: If the new username or email is already taken
        """
        validate_id(user_id)
        update = validate_update_payload(data)

        if update.is_favorites_update:
            await self._replace_favorites(user_id, update)
        else:
            await self._update_profile(user_id, update)

    async def _replace_favorites(self, user_id: str, update: UserUpdate) -> None:
        matched = await self.user_repository.replace_favorites(user_id, update.favorites)
        if not matched:
            raise NotFoundError(f"user with id {user_id} not found")

        logger.info(f"Replaced favorites of user {user_id} ({len(update.favorites)} items)")

    async def _update_profile(self, user_id: str, update: UserUpdate) -> None:
        document = await self.user_repository.find_by_id(user_id)
        if document is None:
            raise NotFoundError(f"user with id {user_id} not found")

        user = User.from_document(sanitize_document(document))
        if not verify_password(update.password, user.hashed_password):
            raise CredentialsError("wrong password")

        changes = update.profile_changes()
        if update.new_password:
            changes[UserFields.PASSWORD] = hash_password(update.new_password)

        try:
            matched = await self.user_repository.update(user_id, changes)
        except DuplicateKeyViolation:
            raise ConflictError("user with that username or email already exists")

        # Deleted between lookup and write
        if not matched:
            raise NotFoundError(f"user with id {user_id} not found")

        logger.info(f"Modified user {user_id}: {', '.join(sorted(changes))}")
