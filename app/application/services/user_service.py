"""
User Service
============

Application service that coordinates user-related operations.
"""
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.application.use_cases.user.create_user import CreateUserUseCase


class UserService:
    """Application service for user operations."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
        self._create_use_case = CreateUserUseCase(user_repository)
    
    def create_user(self, user: User) -> User:
        """
        Create a user.
        
        Args:
            user: User entity built from the request
            
        Returns:
            Created user entity
        """
        return self._create_use_case.execute(user)
