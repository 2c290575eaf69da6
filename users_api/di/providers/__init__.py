from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .users_provider import UsersProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UsersProvider",
]
