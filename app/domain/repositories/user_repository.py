"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod

from app.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.
    
    This is the only capability the application layer depends on, so the
    service can run against MongoDB, an in-memory store or a test double.
    """
    
    @abstractmethod
    def create(self, user: User) -> User:
        """
        Create a new user.
        
        Implementations must not mutate the given user.
        
        Args:
            user: User entity to create (id may be empty)
            
        Returns:
            Created user entity, carrying the id assigned by the store
        """
        pass
