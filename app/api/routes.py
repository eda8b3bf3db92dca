"""
Route Registration
==================

Mounts the API routers on the FastAPI application and maps request
decoding failures to the public error body.
"""
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.v1 import user_router
from app.application.dto.user_dto import ErrorResponse, INVALID_JSON_MESSAGE

if TYPE_CHECKING:
    from app.di.container import DIContainer


async def invalid_json_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body decoding failures as 400 with a fixed message."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=INVALID_JSON_MESSAGE).model_dump(),
    )


def register_routes(application: FastAPI, container: "DIContainer") -> None:
    """
    Register API routes backed by the given container.
    
    Args:
        application: FastAPI application
        container: Fully built DI container
    """
    application.state.container = container
    application.add_exception_handler(RequestValidationError, invalid_json_handler)
    application.include_router(user_router, prefix="/api")
