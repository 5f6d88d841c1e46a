"""
Storage strategies using Strategy Pattern.
Allows switching between storage backends (Redis, In-Memory) without
touching the service layer.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from redis.exceptions import RedisError

from link_shortener.exceptions import StorageError

logger = logging.getLogger(__name__)


class StorageStrategy(ABC):
    """
    Abstract base class for hash -> URL storage.

    The data contract is exactly ``put`` and ``get``. ``connect`` and
    ``close`` are lifecycle hooks called by the application on startup
    and shutdown.

    All methods are async because the durable backend does network I/O.
    """

    @abstractmethod
    async def put(self, key: str, value: str) -> str:
        """
        Store a mapping, overwriting any existing value for the key.

        Args:
            key: The hash
            value: The URL

        Returns:
            The value as stored by the backend

        Raises:
            StorageError: If the backend could not complete the write
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Look up a mapping.

        Args:
            key: The hash

        Returns:
            The stored URL or None if no mapping exists

        Raises:
            StorageError: If the backend could not complete the read
        """
        pass

    async def connect(self) -> None:
        """Acquire backend resources (no-op by default)"""

    async def close(self) -> None:
        """Release backend resources (no-op by default)"""


class RedisStorage(StorageStrategy):
    """
    Redis storage with async operations.

    Values are stored as plain strings with no expiry, so mappings live as
    long as the Redis dataset does.

    Expects a ``redis.asyncio.Redis`` client created with
    ``decode_responses=True``.
    """

    def __init__(self, redis_client):
        """
        Initialize Redis storage.

        Args:
            redis_client: redis.asyncio.Redis instance
        """
        self.redis = redis_client

    async def connect(self) -> None:
        """
        Check the connection once at startup.

        A failure is logged, not raised: the app still starts and each
        operation reports its own error while Redis is down.
        """
        try:
            await self.redis.ping()
            logger.info("Redis connected")
        except RedisError as e:
            logger.error("Redis connection failed: %s", e)

    async def put(self, key: str, value: str) -> str:
        """SET the key, then GET it back to confirm the stored value"""
        try:
            await self.redis.set(key, value)
            return await self.redis.get(key)
        except RedisError as e:
            logger.error("Redis put error for %s: %s", key, e)
            raise StorageError(f"Redis put failed: {e}") from e

    async def get(self, key: str) -> Optional[str]:
        """GET the key"""
        try:
            return await self.redis.get(key)
        except RedisError as e:
            logger.error("Redis get error for %s: %s", key, e)
            raise StorageError(f"Redis get failed: {e}") from e

    async def close(self) -> None:
        """Close the client's connection pool"""
        await self.redis.aclose()
        logger.info("Redis connection closed")


class InMemoryStorage(StorageStrategy):
    """
    In-memory storage using a Python dict.

    Lost on restart and not shared between processes. Good for
    development and testing.
    Note: Async for interface consistency, but operations are instant.
    """

    def __init__(self):
        """Initialize empty in-memory storage"""
        self._data: Dict[str, str] = {}

    async def put(self, key: str, value: str) -> str:
        self._data[key] = value
        return self._data[key]

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)
