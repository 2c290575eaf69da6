# Standard library imports
import logging

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import Settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create the MongoDB client shared by the whole process

    Args:
        settings: Application settings with the connection URI

    Returns:
        Motor client (connects lazily)
    """
    return AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )


async def connect(settings: Settings) -> AsyncIOMotorClient:
    """
    Create a client and make sure MongoDB is reachable

    Raises:
        RuntimeError: If the server does not answer a ping
    """
    client = create_client(settings)
    try:
        await client.admin.command("ping")
    except Exception as e:
        client.close()
        raise RuntimeError(f"Failed to connect to MongoDB: {e}") from e

    logger.info(f"Connected to MongoDB database '{settings.mongo_database_name}'")
    return client


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.mongo_database_name]


def get_user_collection(database: AsyncIOMotorDatabase, settings: Settings) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return database[settings.mongo_users_collection]


async def ensure_user_indexes(user_collection: AsyncIOMotorCollection) -> None:
    """Create the unique indexes that keep username and email distinct"""
    await user_collection.create_index([(UserFields.USERNAME, ASCENDING)], unique=True)
    await user_collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
    logger.info("Unique indexes on users.username and users.email are in place")
