# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase

# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UsersProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    The database handle is passed in by the application lifespan, so each
    application (or test) owns its own connection scope.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (UsersProvider) - depend on repositories
    """

    def __init__(self, database: AsyncIOMotorDatabase, settings: Settings) -> None:
        super().__init__()
        self.register_singleton("settings", settings)
        self.register_singleton("database", database)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        UsersProvider.register(self)
