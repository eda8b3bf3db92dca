from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.user_service import UserService
from ...api.v1.user_controller import UserHandler

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User provider - registers the user service and its HTTP handler"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register user service and handler.
        Service is created with the repository from container, handler with the service.
        """
        container.register_singleton(
            UserService,
            UserService(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_singleton(
            UserHandler,
            UserHandler(
                user_service=container.get(UserService)
            )
        )
