"""
Test configuration and fixtures for the link shortener.
This centralizes all test setup, making individual tests clean.
"""

import os

# Settings are read at import time; keep the app off a real Redis server
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from main import app
from link_shortener.dependencies import get_storage
from link_shortener.storage.factory import StorageFactory
from link_shortener.storage.strategies import InMemoryStorage


class FakeRedis:
    """
    Stand-in for redis.asyncio.Redis (decode_responses=True).

    Covers the commands RedisStorage uses. Set ``fail=True`` to make every
    command raise a redis ConnectionError.
    """

    def __init__(self, fail: bool = False):
        self.data = {}
        self.fail = fail
        self.closed = False
        self.calls = []

    def _check(self, command: str):
        self.calls.append(command)
        if self.fail:
            raise RedisConnectionError("Error connecting to redis:6379")

    async def ping(self):
        self._check("PING")
        return True

    async def set(self, key, value):
        self._check("SET")
        self.data[key] = value
        return True

    async def get(self, key):
        self._check("GET")
        return self.data.get(key)

    async def aclose(self):
        self.closed = True


@pytest.fixture(scope="function")
def memory_storage():
    """Fresh in-memory storage for each test"""
    return InMemoryStorage()


@pytest.fixture(scope="function")
def fake_redis():
    return FakeRedis()


@pytest.fixture(scope="function")
def client(memory_storage):
    """
    Create a test client with storage dependency overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_storage] = lambda: memory_storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    StorageFactory.clear_instance()
    get_storage.cache_clear()
