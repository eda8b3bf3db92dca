# Standard library imports
import logging
import time
from typing import Any, Dict, List, Tuple, Type, TypeVar, Union

from app.core.exceptions import ShutdownError

logger = logging.getLogger(__name__)

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""
    
    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self._resources: List[Tuple[str, Any]] = []
        self._shut_down = False
    
    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance
    
    def register_resource(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType, name: str) -> None:
        """
        Register a singleton the container owns and must close on shutdown.
        
        The instance must expose close(timeout_seconds).
        """
        self.register_singleton(interface, instance)
        self._resources.append((name, instance))
    
    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        # Check if singleton exists (supports both types and strings)
        if interface in self.instances:
            return self.instances[interface]
        
        raise ValueError(f"No registration found for {interface}")
    
    @property
    def is_shut_down(self) -> bool:
        return self._shut_down
    
    def shutdown(self, timeout_seconds: float = 5.0) -> None:
        """
        Close owned resources in reverse registration order.
        
        Calling it again after the first call is a no-op. Every resource is
        attempted even if an earlier one fails; the first failure is raised
        once all of them were processed.
        
        Raises:
            ShutdownError: If a resource failed to close within the deadline
        """
        if self._shut_down:
            return
        self._shut_down = True
        
        print("\n🧹 Closing resources...")
        deadline = time.monotonic() + timeout_seconds
        errors: List[ShutdownError] = []
        for name, resource in reversed(self._resources):
            remaining = max(deadline - time.monotonic(), 0.0)
            try:
                resource.close(remaining)
            except ShutdownError as e:
                logger.error(f"❌ Error closing {name}: {e}")
                errors.append(e)
                continue
            print(f"✅ {name} closed correctly")
        
        if errors:
            raise errors[0]
