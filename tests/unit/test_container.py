"""Unit tests for the DI container: construction order and shutdown."""

from unittest.mock import MagicMock

import pytest
from pymongo import errors

from app.api.v1.user_controller import UserHandler
from app.application.services.user_service import UserService
from app.core.config import Settings
from app.core.exceptions import ConnectivityError, ShutdownError
from app.di.base_container import BaseContainer
from app.di.container import DIContainer
from app.di.providers import RepositoryProvider
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.db.mongo_connection import MongoStoreClient
from app.infrastructure.db.mongo_user_repository import MongoUserRepository


class TestConstruction:
    def test_builds_object_graph(self, container, store_client):
        repository = container.get(UserRepository)
        service = container.get(UserService)
        handler = container.get(UserHandler)

        assert container.get(MongoStoreClient) is store_client
        assert isinstance(repository, MongoUserRepository)
        assert repository._store_client is store_client
        assert service._repository is repository
        assert handler._service is service

    def test_connect_receives_settings(self, env, monkeypatch, store_client):
        env.setenv("STORE_URI", "mongodb://db:27017")
        env.setenv("STORE_DB", "users_db")
        connect = MagicMock(return_value=store_client)
        monkeypatch.setattr(MongoStoreClient, "connect", connect)

        DIContainer(Settings())

        connect.assert_called_once_with("mongodb://db:27017", "users_db", timeout_seconds=10.0)

    def test_store_failure_aborts_construction(self, env, monkeypatch):
        monkeypatch.setattr(
            MongoStoreClient,
            "connect",
            MagicMock(side_effect=ConnectivityError("connection refused")),
        )

        with pytest.raises(ConnectivityError, match="connection refused"):
            DIContainer(Settings())

    def test_later_failure_closes_store(self, env, monkeypatch, store_client):
        monkeypatch.setattr(MongoStoreClient, "connect", MagicMock(return_value=store_client))
        monkeypatch.setattr(RepositoryProvider, "register", MagicMock(side_effect=RuntimeError("wiring")))

        with pytest.raises(RuntimeError, match="wiring"):
            DIContainer(Settings())

        assert store_client.is_closed

    def test_cleanup_failure_keeps_construction_error(self, env, monkeypatch, store_client):
        store_client._client.close.side_effect = errors.PyMongoError("socket error")
        monkeypatch.setattr(MongoStoreClient, "connect", MagicMock(return_value=store_client))
        monkeypatch.setattr(RepositoryProvider, "register", MagicMock(side_effect=RuntimeError("wiring")))

        with pytest.raises(RuntimeError, match="wiring"):
            DIContainer(Settings())


class TestShutdown:
    def test_closes_store_and_reports(self, container, store_client, capsys):
        container.shutdown(5)

        assert store_client.is_closed
        assert container.is_shut_down
        assert "✅ MongoDB closed correctly" in capsys.readouterr().out

    def test_second_call_is_noop(self, container, capsys):
        container.shutdown(5)
        capsys.readouterr()

        container.shutdown(5)

        assert capsys.readouterr().out == ""

    def test_reverse_registration_order(self):
        closed = []
        container = BaseContainer()
        for name in ("first", "second"):
            resource = MagicMock()
            resource.close.side_effect = lambda timeout, name=name: closed.append(name)
            container.register_resource(name, resource, name=name)

        container.shutdown(1)

        assert closed == ["second", "first"]

    def test_failure_still_closes_remaining(self):
        container = BaseContainer()
        healthy = MagicMock()
        failing = MagicMock()
        failing.close.side_effect = ShutdownError("timeout")
        container.register_resource("healthy", healthy, name="healthy")
        container.register_resource("failing", failing, name="failing")

        with pytest.raises(ShutdownError, match="timeout"):
            container.shutdown(1)

        healthy.close.assert_called_once()

    def test_unknown_registration(self):
        with pytest.raises(ValueError):
            BaseContainer().get(UserService)
