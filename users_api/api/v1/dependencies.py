# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...core.security import decode_access_token
from ...di.base_container import BaseContainer
from ...domain.errors import UserError
from ...domain.validators import validate_token


security_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the DI container of the running application
    """
    return request.app.state.container


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> str:
    """
    FastAPI dependency extracting the caller's user ID from a bearer token

    Args:
        credentials: HTTP Bearer token credentials

    Returns:
        The ``sub`` claim of the token

    Raises:
        HTTPException: If the token is missing, malformed, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="missing bearer token",
        )

    token: str = credentials.credentials

    try:
        validate_token(token)
        user_id = decode_access_token(token)
    except (UserError, ValueError) as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception)
        )

    return user_id
