from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.users.register_user import RegisterUserUseCase
from ...application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from ...application.use_cases.users.retrieve_user import RetrieveUserUseCase
from ...application.use_cases.users.modify_user import ModifyUserUseCase
from ...application.use_cases.users.unregister_user import UnregisterUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UsersProvider:
    """User use case provider - registers all user operations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        use_cases = (
            RegisterUserUseCase,
            AuthenticateUserUseCase,
            RetrieveUserUseCase,
            ModifyUserUseCase,
            UnregisterUserUseCase,
        )
        for use_case in use_cases:
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    user_repository=container.get(UserRepository)
                )
            )
