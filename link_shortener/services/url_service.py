import logging
from typing import Optional

from link_shortener.config import settings
from link_shortener.exceptions import HashCollisionError, HashNotFoundError
from link_shortener.services.hash_generator import HashGenerator
from link_shortener.storage.strategies import StorageStrategy

logger = logging.getLogger(__name__)


class URLService:
    """
    URL Service with dependency injection for storage.

    The storage strategy is injected (not created internally), so the
    same service runs against Redis in production and a dict in tests.
    The service keeps no mappings of its own.
    """

    def __init__(
        self,
        storage: StorageStrategy,
        hash_generator: Optional[HashGenerator] = None,
        max_attempts: Optional[int] = None
    ):
        """
        Initialize URL service with dependencies.

        Args:
            storage: Storage strategy holding the hash -> URL mappings
            hash_generator: Generator for new hashes (default from settings)
            max_attempts: Hashes to try before giving up on collisions
        """
        if max_attempts is None:
            max_attempts = settings.max_retries
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.storage = storage
        self.hash_generator = hash_generator or HashGenerator(length=settings.hash_length)
        self.max_attempts = max_attempts

    async def shorten(self, url: str) -> str:
        """Store ``url`` under a new hash and return the hash

        The url is stored as given; validation is the caller's job.

        Process:
        1. Generate a hash, skipping any already present in storage
        2. Write the mapping
        3. Return the hash once storage confirms the write

        The existence check and the write are separate calls, so two
        concurrent requests drawing the same hash can still overwrite
        each other.

        Raises:
            HashCollisionError: If every attempt hit an existing hash
            StorageError: If the backend fails (not retried)
        """
        hash_ = await self._unused_hash()
        await self.storage.put(hash_, url)
        logger.debug("Shortened %s -> %s", url, hash_)
        return hash_

    async def retrieve(self, hash_: str) -> Optional[str]:
        """Get the URL for a hash

        Returns the stored URL, or None if the hash is unknown.
        """
        return await self.storage.get(hash_)

    async def resolve(self, hash_: str) -> str:
        """Get the URL for a hash, raising HashNotFoundError if unknown"""
        url = await self.retrieve(hash_)
        if url is None:
            raise HashNotFoundError(hash_)
        return url

    async def _unused_hash(self) -> str:
        for attempt in range(1, self.max_attempts + 1):
            hash_ = self.hash_generator.generate()
            if await self.storage.get(hash_) is None:
                return hash_
            logger.warning("Hash collision on %s (attempt %d)", hash_, attempt)

        raise HashCollisionError(self.max_attempts)
