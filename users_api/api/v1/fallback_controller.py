# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse


router = APIRouter(tags=["fallback"])


@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
    include_in_schema=False,
)
async def endpoint_not_available(path: str) -> JSONResponse:
    """Answer every unknown /api route"""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "sorry, this endpoint is not available"},
    )
