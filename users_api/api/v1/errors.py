# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...domain.errors import ErrorKind, UserError


STATUS_BY_KIND = {
    ErrorKind.TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


def to_http_exception(exception: UserError) -> HTTPException:
    """Map a domain error to the HTTP status its kind stands for"""
    return HTTPException(
        status_code=STATUS_BY_KIND.get(exception.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=exception.message,
    )
