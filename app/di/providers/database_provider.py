from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoStoreClient

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all database connections in the container.
        This is the ONLY place where database connections are opened; the
        container owns them and closes them on shutdown.
        """
        settings = container.settings
        store_client = MongoStoreClient.connect(
            settings.store_uri,
            settings.store_database_name,
            timeout_seconds=settings.store_connect_timeout_seconds,
        )
        
        container.register_resource(MongoStoreClient, store_client, name="MongoDB")
