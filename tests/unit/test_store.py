"""Tests for store configuration and wiring."""

from unittest.mock import patch

import pytest

from otaku_store.application.config import Settings
from otaku_store.application.store import OtakuStore, build_store, create_storage
from otaku_store.infrastructure.dynamodb_storage_adapter import DynamoDBStorageAdapter
from otaku_store.infrastructure.local_storage_adapter import LocalStorageAdapter


@pytest.fixture
def config():
    """Fast settings for tests."""
    return Settings(auth_latency_seconds=0, bcrypt_rounds=4, storage_backend="memory")


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ["OTAKU_HISTORY_LIMIT", "OTAKU_STORAGE_BACKEND", "OTAKU_STRICT_FAVORITE_REMOVAL"]:
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.app_name == "otaku-store"
        assert config.storage_backend == "memory"
        assert config.session_key == "otaku_user"
        assert config.accounts_key == "otaku_users"
        assert config.history_limit == 50
        assert config.auth_latency_seconds == 1.0
        assert config.bcrypt_rounds == 12
        assert config.strict_favorite_removal is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("OTAKU_HISTORY_LIMIT", "10")
        monkeypatch.setenv("OTAKU_STRICT_FAVORITE_REMOVAL", "true")

        config = Settings(_env_file=None)

        assert config.history_limit == 10
        assert config.strict_favorite_removal is True

    def test_invalid_backend(self):
        with pytest.raises(Exception):  # Pydantic validation error
            Settings(_env_file=None, storage_backend="redis")

    def test_invalid_bcrypt_rounds(self):
        with pytest.raises(Exception):  # Pydantic validation error
            Settings(_env_file=None, bcrypt_rounds=2)


class TestBuildStore:
    """Tests for build_store."""

    def test_memory_backend(self, config):
        store = build_store(config)

        assert isinstance(store, OtakuStore)
        assert isinstance(store.storage, LocalStorageAdapter)
        assert store.session.current is None
        assert store.watch_history.limit == 50

    def test_dynamodb_backend(self, config):
        config = config.model_copy(update={"storage_backend": "dynamodb", "storage_table_name": "test-table"})

        with patch("otaku_store.infrastructure.dynamodb_storage_adapter.boto3"):
            storage = create_storage(config)

        assert isinstance(storage, DynamoDBStorageAdapter)
        assert storage.table_name == "test-table"

    def test_settings_flow_into_services(self, config):
        config = config.model_copy(update={"history_limit": 5, "strict_favorite_removal": True, "session_key": "tab"})

        store = build_store(config)

        assert store.watch_history.limit == 5
        assert store.favorites.strict_removal is True
        assert store.session.session_key == "tab"

    @pytest.mark.asyncio
    async def test_build_store_restores_session(self, config):
        shared = LocalStorageAdapter()
        first = build_store(config, storage=shared)
        await first.session.register("demo", "demo123", "demo@x.com")
        first.favorites.add({"id": "m1"})

        second = build_store(config, storage=shared)

        assert second.session.current.username == "demo"
        assert second.favorites.contains("m1") is True

    @pytest.mark.asyncio
    async def test_health_status(self, config):
        store = build_store(config)
        assert store.get_health_status() == {
            "status": "healthy",
            "session_state": "unauthenticated",
            "providers": {
                "storage": "LocalStorageAdapter",
                "accounts": "StorageAccountRepository",
            },
        }

        await store.session.register("demo", "demo123", "demo@x.com")

        assert store.get_health_status()["session_state"] == "authenticated"
