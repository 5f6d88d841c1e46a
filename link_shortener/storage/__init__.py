"""
Storage module for hash -> URL mappings.
Implements Strategy Pattern for flexible storage backends.
"""

from .strategies import StorageStrategy, RedisStorage, InMemoryStorage
from .factory import StorageFactory, StorageBackend

__all__ = [
    "StorageStrategy",
    "RedisStorage",
    "InMemoryStorage",
    "StorageFactory",
    "StorageBackend",
]
