"""
Tests for the storage factory.
"""
import asyncio

import pytest

from link_shortener.config import settings
from link_shortener.dependencies import get_storage
from link_shortener.storage.factory import StorageFactory, StorageBackend
from link_shortener.storage.strategies import InMemoryStorage, RedisStorage


@pytest.fixture(autouse=True)
def reset_factory():
    StorageFactory.clear_instance()
    yield
    StorageFactory.clear_instance()


class TestStorageFactory:
    """Test storage factory"""

    def test_creates_memory_storage(self):
        storage = StorageFactory.create(StorageBackend.MEMORY)
        assert isinstance(storage, InMemoryStorage)

    def test_creates_redis_storage(self):
        """Redis client connects lazily, so no server is needed here"""
        storage = StorageFactory.create(StorageBackend.REDIS)
        assert isinstance(storage, RedisStorage)
        asyncio.run(storage.close())

    def test_returns_singleton(self):
        first = StorageFactory.create(StorageBackend.MEMORY)
        second = StorageFactory.create(StorageBackend.MEMORY)
        assert first is second

    def test_clear_instance(self):
        first = StorageFactory.create(StorageBackend.MEMORY)
        StorageFactory.clear_instance()
        second = StorageFactory.create(StorageBackend.MEMORY)
        assert first is not second

    def test_unknown_backend_setting(self, monkeypatch):
        """An unsupported STORAGE_BACKEND fails when the backend is requested"""
        monkeypatch.setattr(settings, "storage_backend", "postgres")
        get_storage.cache_clear()

        try:
            with pytest.raises(ValueError):
                get_storage()
        finally:
            get_storage.cache_clear()
