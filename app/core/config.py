# Standard library imports
import os
from typing import Final
from dotenv import load_dotenv

from app.core.exceptions import ConfigurationError


def _read_number(name: str, default: str, cast=float):
    raw = os.getenv(name, default)
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"❌ {name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"❌ {name} must be positive, got {raw!r}")
    return value


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    Settings with a sensible default fall back to it; STORE_URI has none.
    
    Raises:
        ConfigurationError: If a variable is missing or malformed
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Document store configuration
        store_uri = os.getenv("STORE_URI", "").strip()
        if not store_uri:
            raise ConfigurationError("❌ STORE_URI not set. Please configure it in your .env file.")
        if not store_uri.startswith(("mongodb://", "mongodb+srv://")):
            raise ConfigurationError("❌ STORE_URI must start with mongodb:// or mongodb+srv://")
        self.store_uri: Final[str] = store_uri
        
        store_db = os.getenv("STORE_DB", "testdb").strip()
        if not store_db:
            raise ConfigurationError("❌ STORE_DB cannot be empty")
        self.store_database_name: Final[str] = store_db
        
        # HTTP server configuration
        self.http_host: Final[str] = os.getenv("HTTP_HOST", "0.0.0.0")
        self.http_port: Final[int] = _read_number("HTTP_PORT", "3001", cast=int)
        if self.http_port > 65535:
            raise ConfigurationError(f"❌ HTTP_PORT out of range: {self.http_port}")
        
        # Lifecycle deadlines (seconds)
        self.store_connect_timeout_seconds: Final[float] = _read_number(
            "STORE_CONNECT_TIMEOUT_SECONDS", "10"
        )
        self.shutdown_timeout_seconds: Final[float] = _read_number(
            "SHUTDOWN_TIMEOUT_SECONDS", "5"
        )
        
        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        if self.log_level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ConfigurationError(f"❌ LOG_LEVEL not recognized: {self.log_level}")
