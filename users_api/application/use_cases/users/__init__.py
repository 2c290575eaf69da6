from .register_user import RegisterUserUseCase
from .authenticate_user import AuthenticateUserUseCase
from .retrieve_user import RetrieveUserUseCase
from .modify_user import ModifyUserUseCase
from .unregister_user import UnregisterUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "AuthenticateUserUseCase",
    "RetrieveUserUseCase",
    "ModifyUserUseCase",
    "UnregisterUserUseCase",
]
