# Standard library imports
from typing import Any

# External package imports
from fastapi import APIRouter, Body, Depends, Response, status

# Local application imports
from ...application.dto.auth_dto import (
    UserRegistrationRequest,
    UserAuthenticationRequest,
    UserUnregistrationRequest,
    TokenResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.users.register_user import RegisterUserUseCase
from ...application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from ...application.use_cases.users.retrieve_user import RetrieveUserUseCase
from ...application.use_cases.users.modify_user import ModifyUserUseCase
from ...application.use_cases.users.unregister_user import UnregisterUserUseCase
from ...core.security import create_access_token
from ...di.base_container import BaseContainer
from ...domain.errors import UserError
from .dependencies import get_container, get_current_user_id
from .errors import to_http_exception


router = APIRouter(tags=["users"])


@router.post("/users", status_code=status.HTTP_201_CREATED, response_class=Response)
async def register_user(
    request: UserRegistrationRequest,
    container: BaseContainer = Depends(get_container),
) -> Response:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        Empty 201 response
    """
    register_use_case = container.get(RegisterUserUseCase)

    try:
        await register_use_case.execute(
            name=request.name,
            username=request.username,
            email=request.email,
            password=request.password,
        )
    except UserError as exception:
        raise to_http_exception(exception)

    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/users/auth", response_model=TokenResponse)
async def authenticate_user(
    request: UserAuthenticationRequest,
    container: BaseContainer = Depends(get_container),
) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: Username and password

    Returns:
        TokenResponse whose token carries the user ID as ``sub``
    """
    authenticate_use_case = container.get(AuthenticateUserUseCase)

    try:
        user_id = await authenticate_use_case.execute(
            username=request.username,
            password=request.password,
        )
    except UserError as exception:
        raise to_http_exception(exception)

    return TokenResponse(token=create_access_token(user_id))


@router.get("/users", response_model=UserResponse)
async def retrieve_user(
    user_id: str = Depends(get_current_user_id),
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Get the authenticated user's profile

    Returns:
        UserResponse without password
    """
    retrieve_use_case = container.get(RetrieveUserUseCase)

    try:
        return await retrieve_use_case.execute(user_id)
    except UserError as exception:
        raise to_http_exception(exception)


@router.patch("/users", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def modify_user(
    data: Any = Body(default=None),
    user_id: str = Depends(get_current_user_id),
    container: BaseContainer = Depends(get_container),
) -> Response:
    """
    Modify the authenticated user

    Args:
        data: Update payload, passed unchanged to the domain validators
    """
    modify_use_case = container.get(ModifyUserUseCase)

    try:
        await modify_use_case.execute(user_id, data)
    except UserError as exception:
        raise to_http_exception(exception)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/users", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def unregister_user(
    request: UserUnregistrationRequest,
    user_id: str = Depends(get_current_user_id),
    container: BaseContainer = Depends(get_container),
) -> Response:
    """
    Delete the authenticated user after confirming the password

    Args:
        request: Body with the current password
    """
    unregister_use_case = container.get(UnregisterUserUseCase)

    try:
        await unregister_use_case.execute(user_id, request.password)
    except UserError as exception:
        raise to_http_exception(exception)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
