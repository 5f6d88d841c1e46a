"""
FastAPI dependencies wiring routes to the shortening service.

get_storage() turns STORAGE_BACKEND into the shared backend instance;
tests replace it through app.dependency_overrides. URLService never
looks at which backend it was given.
"""

from functools import lru_cache

from fastapi import Depends

from link_shortener.config import settings
from link_shortener.services.url_service import URLService
from link_shortener.storage.factory import StorageFactory, StorageBackend
from link_shortener.storage.strategies import StorageStrategy


@lru_cache()
def get_storage() -> StorageStrategy:
    """
    Return the backend named by STORAGE_BACKEND, built on first use.

    Raises:
        ValueError: If STORAGE_BACKEND is not a known backend
    """
    backend = StorageBackend(settings.storage_backend)
    return StorageFactory.create(backend)


def get_url_service(storage: StorageStrategy = Depends(get_storage)) -> URLService:
    """Get URLService with its storage injected"""
    return URLService(storage=storage)
