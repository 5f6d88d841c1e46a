from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from link_shortener.config import settings
from link_shortener.logging_config import setup_logging
from link_shortener.api.v1 import urls, redirect
from link_shortener.dependencies import get_storage
from link_shortener.exceptions import HashCollisionError, HashNotFoundError, StorageError
from link_shortener.schemas.url import ErrorResponse
from link_shortener.storage.factory import StorageFactory

logger = setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the storage backend: connect on startup, close on shutdown"""
    storage = get_storage()
    await storage.connect()
    try:
        yield
    finally:
        await storage.close()
        StorageFactory.clear_instance()
        get_storage.cache_clear()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A link shortener service built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan
)


def _error(code: int, exc: Exception) -> JSONResponse:
    error = ErrorResponse(error=str(exc), code=code)
    return JSONResponse(status_code=code, content=error.model_dump())


@app.exception_handler(HashNotFoundError)
async def hash_not_found_handler(request: Request, exc: HashNotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc)


@app.exception_handler(HashCollisionError)
async def hash_collision_handler(request: Request, exc: HashCollisionError):
    logger.error("%s", exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(urls.router)
app.include_router(redirect.router)
