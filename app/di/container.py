# Standard library imports
import logging

# Local application imports
from app.core.exceptions import ShutdownError
from app.core.config import Settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Service and HTTP handler (UserProvider) - depend on repositories
    
    The container is built by the entry point and handed to the API layer;
    there is no module-level instance.
    """
    
    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        try:
            self.setup()
        except Exception:
            # Release whatever was acquired before the failing step; the
            # construction error is what propagates
            try:
                self.shutdown(settings.shutdown_timeout_seconds)
            except ShutdownError as close_error:
                logger.error(f"❌ Error closing resources after failed startup: {close_error}")
            raise
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → service → handler
        """
        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)
        
        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)
        
        # Step 3: Register service and handler (depends on repositories)
        UserProvider.register(self)
