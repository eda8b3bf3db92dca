"""Shared fixtures for the User API test suite.

Provides:
- Environment isolation (no .env file is read during tests)
- A store client whose pymongo client and database are MagicMocks
- A real DIContainer wired on top of that store client
- Repository test doubles implementing the UserRepository capability
"""

import threading
import uuid
from dataclasses import replace
from typing import Dict, List
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.api.routes import register_routes
from app.di.container import DIContainer
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.db.mongo_connection import MongoStoreClient
from app.main import create_application


# =============================================================================
# Test Doubles
# =============================================================================


class RecordingUserRepository(UserRepository):
    """Accepts every insert and remembers what it was given."""

    def __init__(self):
        self.received: List[User] = []
        self._lock = threading.Lock()

    def create(self, user: User) -> User:
        with self._lock:
            self.received.append(user)
        return user


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed repository that assigns a hex id when none is given."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def create(self, user: User) -> User:
        stored = replace(user, id=user.id if user.has_id() else uuid.uuid4().hex)
        with self._lock:
            self._users[stored.id] = stored
        return stored

    def all(self) -> List[User]:
        with self._lock:
            return list(self._users.values())


class FailingUserRepository(UserRepository):
    """Rejects every insert with the configured error."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    def create(self, user: User) -> User:
        self.calls += 1
        raise self.error


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def env(monkeypatch):
    """Minimal valid configuration; .env files are ignored."""
    monkeypatch.setattr("app.core.config.load_dotenv", lambda *args, **kwargs: False)
    for name in (
        "STORE_DB",
        "HTTP_PORT",
        "HTTP_HOST",
        "STORE_CONNECT_TIMEOUT_SECONDS",
        "SHUTDOWN_TIMEOUT_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("STORE_URI", "mongodb://localhost:27017")
    return monkeypatch


@pytest.fixture
def users_collection():
    """Mock of the 'users' collection; insert_one returns a fresh ObjectId."""
    collection = MagicMock(name="users")
    collection.insert_one.side_effect = lambda doc: MagicMock(inserted_id=doc.get("_id", ObjectId()))
    return collection


@pytest.fixture
def store_client(users_collection):
    """Connected-looking store client backed by MagicMocks."""
    database = MagicMock(name="database")
    database.__getitem__.return_value = users_collection
    return MongoStoreClient(client=MagicMock(name="mongo_client"), database=database)


@pytest.fixture
def container(env, monkeypatch, store_client):
    """Real DI container whose store connection is replaced by store_client."""
    from app.core.config import Settings

    monkeypatch.setattr(MongoStoreClient, "connect", classmethod(lambda cls, *args, **kwargs: store_client))
    built = DIContainer(Settings())
    yield built
    built.shutdown()


@pytest.fixture
def app(container):
    """FastAPI application with routes registered against the container."""
    application = create_application()
    register_routes(application, container)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient for the application."""
    return TestClient(app, raise_server_exceptions=False)
