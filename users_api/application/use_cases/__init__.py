from .users import (
    RegisterUserUseCase,
    AuthenticateUserUseCase,
    RetrieveUserUseCase,
    ModifyUserUseCase,
    UnregisterUserUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "AuthenticateUserUseCase",
    "RetrieveUserUseCase",
    "ModifyUserUseCase",
    "UnregisterUserUseCase",
]
