"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
import logging
from dataclasses import replace

from pymongo import errors

from app.core.exceptions import ConnectivityError, PersistenceError
from app.domain.constants.user_fields import UserFields
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.db.mongo_connection import MongoStoreClient

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.
    
    Holds a non-owning reference to the store client; the DI container
    is responsible for closing it.
    """
    
    COLLECTION_NAME = "users"
    
    def __init__(self, store_client: MongoStoreClient):
        """Initialize repository with the shared store client."""
        self._store_client = store_client
    
    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document."""
        doc = {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
        }
        # Let MongoDB assign an ObjectId when no id was provided
        if user.has_id():
            doc[UserFields.MONGO_ID] = user.id
        return doc
    
    def create(self, user: User) -> User:
        """Create a new user."""
        doc = self._to_document(user)
        try:
            collection = self._store_client.get_collection(self.COLLECTION_NAME)
            result = collection.insert_one(doc)
        except errors.ConnectionFailure as e:
            raise ConnectivityError(str(e)) from e
        except errors.PyMongoError as e:
            raise PersistenceError(str(e)) from e
        
        logger.debug(f"Inserted user {result.inserted_id} into '{self.COLLECTION_NAME}'")
        return replace(user, id=str(result.inserted_id))
