"""
Dependency Resolution
=====================

FastAPI dependencies resolving components from the DI container attached
to the application state by the route registration.
"""
from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from app.api.v1.user_controller import UserHandler
    from app.di.container import DIContainer


def get_container(request: Request) -> "DIContainer":
    """
    Get the DI container of the running application.
    
    Returns:
        DIContainer instance stored on app.state
    """
    return request.app.state.container


def get_user_handler(request: Request) -> "UserHandler":
    """
    Get user handler instance.
    
    Returns:
        UserHandler instance owned by the container
    """
    from app.api.v1.user_controller import UserHandler
    
    return get_container(request).get(UserHandler)
