"""
Create User Use Case
====================

Business use case for creating a new user.
"""
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository


class CreateUserUseCase:
    """
    Use case for creating a user.
    
    There are no business rules yet: the user is handed to the repository
    exactly as received. Validation or event emission belongs here.
    """
    
    def __init__(self, user_repository: UserRepository):
        """
        Initialize use case with repository.
        
        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository
    
    def execute(self, user: User) -> User:
        """
        Execute the create user use case.
        
        Args:
            user: User to create
            
        Returns:
            Created user entity
        """
        return self._repository.create(user)
