from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import get_user_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB collections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database collections in the container.
        Expects "database" and "settings" to be registered already.
        """
        database = container.get("database")
        settings = container.get("settings")

        container.register_singleton("user_collection", get_user_collection(database, settings))
