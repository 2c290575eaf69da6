# Standard library imports
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.errors import NotFoundError
from ....domain.sanitizers import sanitize_document
from ....domain.validators import validate_id
from ...dto.user_dto import UserResponse


class RetrieveUserUseCase:
    """Use case for reading a user profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: Any) -> UserResponse:
        """
        Retrieve a user by ID

        Args:
            user_id: ID of the user

        Returns:
            UserResponse without the password hash

        Raises:
            NotFoundError: If no user has this ID
        """
        validate_id(user_id)

        document = await self.user_repository.find_by_id(user_id)
        if document is None:
            raise NotFoundError(f"user with id {user_id} not found")

        user = sanitize_document(document)
        user.pop(UserFields.PASSWORD, None)

        return UserResponse(
            id=user[UserFields.ID],
            name=user.get(UserFields.NAME, ""),
            username=user.get(UserFields.USERNAME, ""),
            email=user.get(UserFields.EMAIL, ""),
            favorites=user.get(UserFields.FAVORITES) or [],
        )
