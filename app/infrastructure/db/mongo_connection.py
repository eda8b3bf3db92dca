"""
MongoDB Connection
==================

Store client owning the MongoDB connection pool and the handle to the
configured logical database.
"""
import logging
import threading
from typing import Optional

from pymongo import MongoClient, errors
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.server_api import ServerApi

from app.core.exceptions import ConfigurationError, ConnectivityError, ShutdownError

logger = logging.getLogger(__name__)

STABLE_API_VERSION = "1"


class MongoStoreClient:
    """
    Store client for a single MongoDB deployment.
    
    Instances are built with connect(), which only returns once the server
    answered a ping. The underlying MongoClient pool is thread-safe, so one
    instance is shared by every repository in the process.
    """
    
    def __init__(self, client: Optional[MongoClient] = None, database: Optional[Database] = None):
        self._client = client
        self._database = database
        self._lock = threading.Lock()
    
    @classmethod
    def connect(cls, uri: str, database_name: str, timeout_seconds: float = 10.0) -> "MongoStoreClient":
        """
        Connect to MongoDB and verify the connection with a ping.
        
        Args:
            uri: MongoDB connection string
            database_name: Logical database used by the repositories
            timeout_seconds: Deadline for establishing the connection
            
        Returns:
            Connected store client
            
        Raises:
            ConfigurationError: If the URI cannot be parsed
            ConnectivityError: If the server is unreachable or the ping fails
        """
        timeout_ms = int(timeout_seconds * 1000)
        try:
            client = MongoClient(
                uri,
                server_api=ServerApi(STABLE_API_VERSION),
                connectTimeoutMS=timeout_ms,
                serverSelectionTimeoutMS=timeout_ms,
            )
        except (errors.ConfigurationError, ValueError) as e:
            # pymongo reports some URI defects (e.g. a bad port) as plain ValueError
            raise ConfigurationError(str(e)) from e
        
        database = client[database_name]
        try:
            database.command("ping")
        except errors.PyMongoError as e:
            # Release the pool before reporting the failure
            client.close()
            raise ConnectivityError(str(e)) from e
        
        print(f"✅ Connected to MongoDB: {database_name}")
        return cls(client, database)
    
    @property
    def database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            raise ConnectivityError("MongoDB client is not connected")
        return self._database
    
    @property
    def is_closed(self) -> bool:
        return self._client is None
    
    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.
        
        Args:
            collection_name: Name of the collection
            
        Returns:
            MongoDB Collection object
        """
        return self.database[collection_name]
    
    def close(self, timeout_seconds: float = 5.0) -> None:
        """
        Close MongoDB connection.
        
        Safe to call on a client that was never connected or is already closed.
        
        Raises:
            ShutdownError: If the pool was not released within the deadline
        """
        with self._lock:
            client = self._client
            self._client = None
            self._database = None
        if client is None:
            return
        
        failure = []
        
        def _close() -> None:
            try:
                client.close()
            except errors.PyMongoError as e:
                failure.append(e)
        
        closer = threading.Thread(target=_close, name="mongo-close", daemon=True)
        closer.start()
        closer.join(timeout_seconds)
        if closer.is_alive():
            raise ShutdownError(f"MongoDB did not close within {timeout_seconds}s")
        if failure:
            raise ShutdownError(f"Error closing MongoDB: {failure[0]}") from failure[0]
        logger.debug("MongoDB client closed")
