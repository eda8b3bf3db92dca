"""
Application Errors
==================

Error kinds raised across the layers. Adapters translate driver errors into
these so the HTTP layer and the entry point only deal with one hierarchy.
"""


class UserApiError(Exception):
    """Base class for all application errors."""


class ConfigurationError(UserApiError):
    """Missing or malformed configuration (fatal at startup)."""


class ConnectivityError(UserApiError):
    """Document store unreachable or liveness probe failed."""


class PersistenceError(UserApiError):
    """Document store rejected a write."""


class ShutdownError(UserApiError):
    """A resource failed to close within its deadline."""


class ListenerError(UserApiError):
    """HTTP listener failed to start (e.g. port already in use)."""
