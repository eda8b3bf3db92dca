"""
User Controller
===============

FastAPI controller for user management endpoints.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.dto.user_dto import (
    ErrorResponse,
    UserCreatedResponse,
    UserCreateRequest,
    UserResponse,
)
from app.application.services.user_service import UserService
from app.api.v1.dependencies import get_user_handler

logger = logging.getLogger(__name__)


class UserHandler:
    """
    HTTP handler for user endpoints.
    
    Turns requests into service calls and service outcomes into responses.
    Holds a non-owning reference to the user service.
    """
    
    def __init__(self, user_service: UserService):
        self._service = user_service
    
    def create_user(self, request: UserCreateRequest) -> JSONResponse:
        """Create a user and render the 201 or 500 response."""
        try:
            user = self._service.create_user(request.to_entity())
        except Exception as e:
            logger.error(f"Error creating user: {e}", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(error=str(e)).model_dump(),
            )
        
        body = UserCreatedResponse(user=UserResponse.from_entity(user))
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=body.model_dump(),
        )


router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Malformed JSON body"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Store error"},
    },
    summary="Create a user",
    description="""
    Create a new user.
    
    The body is stored as-is in the MongoDB 'users' collection.
    When no id is given the store assigns one and it is returned in the response.
    """
)
def create_user(
    request: UserCreateRequest,
    handler: UserHandler = Depends(get_user_handler),
) -> JSONResponse:
    """Create a user."""
    return handler.create_user(request)
