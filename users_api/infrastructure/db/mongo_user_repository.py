# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import DuplicateKeyViolation, UserRepository
from ...domain.constants import UserFields


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository

    Unique indexes on username and email are the only guard against
    duplicates; DuplicateKeyError is re-raised as DuplicateKeyViolation and
    every other driver error propagates unchanged.
    """

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def create(self, document: Dict[str, Any]) -> str:
        """
        Insert a new user document

        Args:
            document: User fields, without _id

        Returns:
            ID assigned by MongoDB
        """
        new_document = {k: v for k, v in document.items() if k != UserFields.MONGO_ID}
        try:
            result = await self.user_collection.insert_one(new_document)
        except DuplicateKeyError as e:
            raise DuplicateKeyViolation(str(e)) from e
        return str(result.inserted_id)

    async def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        if not username:
            return None
        return await self.user_collection.find_one({UserFields.USERNAME: username})

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            Raw MongoDB document if found, None otherwise
        """
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return None
        return await self.user_collection.find_one({UserFields.MONGO_ID: object_id})

    async def update(self, user_id: str, fields: Dict[str, Any]) -> bool:
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return False

        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": {k: v for k, v in fields.items() if k != UserFields.MONGO_ID}}
            )
        except DuplicateKeyError as e:
            raise DuplicateKeyViolation(str(e)) from e
        return update_result.matched_count > 0

    async def replace_favorites(self, user_id: str, favorites: List[str]) -> bool:
        return await self.update(user_id, {UserFields.FAVORITES: list(favorites)})

    async def delete(self, user_id: str) -> bool:
        object_id = self._to_object_id(user_id)
        if object_id is None:
            return False

        delete_result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        return delete_result.deleted_count > 0

    @staticmethod
    def _to_object_id(user_id: str) -> Optional[ObjectId]:
        # 24-character ids that are not hex never match a document
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
