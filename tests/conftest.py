"""
Shared pytest fixtures for users-api tests.
"""
import copy
import os
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

# Cheap bcrypt rounds for every test; set before settings are first loaded
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from users_api.core.security import hash_password
from users_api.domain.repositories.user_repository import DuplicateKeyViolation, UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository kept in a dict, with unique username and email like the MongoDB indexes"""

    UNIQUE_FIELDS = ("username", "email")

    def __init__(self) -> None:
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}

    def _check_unique(self, candidate: Dict[str, Any], own_id: Optional[ObjectId] = None) -> None:
        for object_id, document in self.documents.items():
            if object_id == own_id:
                continue
            for field in self.UNIQUE_FIELDS:
                if field in candidate and document.get(field) == candidate[field]:
                    raise DuplicateKeyViolation(f"E11000 duplicate key error: {field}")

    @staticmethod
    def _object_id(user_id: str) -> Optional[ObjectId]:
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

    async def create(self, document: Dict[str, Any]) -> str:
        self._check_unique(document)
        object_id = ObjectId()
        # Mimic a versioned document as an ODM would store it
        self.documents[object_id] = {"_id": object_id, "__v": 0, **copy.deepcopy(document)}
        return str(object_id)

    async def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        for document in self.documents.values():
            if document.get("username") == username:
                return copy.deepcopy(document)
        return None

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        document = self.documents.get(self._object_id(user_id))
        return copy.deepcopy(document) if document is not None else None

    async def update(self, user_id: str, fields: Dict[str, Any]) -> bool:
        object_id = self._object_id(user_id)
        if object_id not in self.documents:
            return False
        self._check_unique(fields, own_id=object_id)
        self.documents[object_id].update(copy.deepcopy(fields))
        return True

    async def replace_favorites(self, user_id: str, favorites: List[str]) -> bool:
        return await self.update(user_id, {"favorites": list(favorites)})

    async def delete(self, user_id: str) -> bool:
        return self.documents.pop(self._object_id(user_id), None) is not None


@pytest.fixture
def user_repo():
    """Empty in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def spy_repo():
    """Mock UserRepository with async methods; use to assert no I/O happened."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def wendy():
    return {
        "name": "Wendy Pan",
        "username": "wendy",
        "email": "wendypan@gmail.com",
        "password": "123123123",
    }


@pytest.fixture
def wendy_document(wendy):
    """Stored document for Wendy, as MongoDB would return it."""
    return {
        "_id": ObjectId(),
        "name": wendy["name"],
        "username": wendy["username"],
        "email": wendy["email"],
        "password": hash_password(wendy["password"]),
        "favorites": [],
    }


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_users_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_users_collection = "users"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"
    mock.cors_origins = ["*"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("users_api.core.config.get_settings", return_value=mock), patch(
        "users_api.core.security.get_settings", return_value=mock
    ):
        yield mock
