from .mongo_connection import (
    connect,
    create_client,
    ensure_user_indexes,
    get_database,
    get_user_collection,
)
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "connect",
    "create_client",
    "ensure_user_indexes",
    "get_database",
    "get_user_collection",
    "MongoUserRepository",
]
