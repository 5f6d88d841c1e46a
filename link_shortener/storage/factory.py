"""
Builds the storage backend selected by STORAGE_BACKEND.

The app holds one backend for its whole lifetime; the Redis client and
its connection pool are shared by every request.
"""

import logging
from enum import Enum

from redis.asyncio import Redis

from .strategies import StorageStrategy, RedisStorage, InMemoryStorage
from link_shortener.config import settings

logger = logging.getLogger(__name__)


class StorageBackend(Enum):
    """Available storage backends"""
    REDIS = "redis"
    MEMORY = "memory"


class StorageFactory:
    """
    Creates the process-wide storage backend.

    The first call builds the backend; later calls return the same object
    until clear_instance() runs at shutdown. Redis host and port come from
    settings.
    """

    _instance: StorageStrategy = None  # Single cached instance

    @classmethod
    def create(cls, backend: StorageBackend) -> StorageStrategy:
        """
        Create or return cached storage instance.

        The Redis client connects lazily; call ``connect()`` on the
        returned storage to check the server at startup.

        Args:
            backend: Type of storage backend (from enum)

        Returns:
            Singleton storage instance
        """
        if cls._instance is not None:
            return cls._instance

        if backend == StorageBackend.REDIS:
            redis_client = Redis(
                host=settings.redis_host,
                port=settings.redis_port,
                decode_responses=True,
            )
            cls._instance = RedisStorage(redis_client)
            logger.info(
                "Redis storage initialized (%s:%s)",
                settings.redis_host,
                settings.redis_port,
            )

        elif backend == StorageBackend.MEMORY:
            cls._instance = InMemoryStorage()
            logger.info("In-memory storage initialized")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (on shutdown and in tests)"""
        cls._instance = None
