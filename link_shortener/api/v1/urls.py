from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from link_shortener.dependencies import get_url_service
from link_shortener.schemas.url import ErrorResponse, ShortenRequest, ShortenResponse
from link_shortener.services.url_service import URLService

router = APIRouter(tags=["urls"])

MISSING_URL_MESSAGE = (
    "No url provided. Please provide in the body. E.g. {'url':'https://google.com'}"
)


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def shorten_url(
    payload: Optional[ShortenRequest] = None,
    url_service: URLService = Depends(get_url_service)
):
    """Create a new short hash for a URL"""
    if payload is None or not payload.url:
        error = ErrorResponse(error=MISSING_URL_MESSAGE, code=status.HTTP_400_BAD_REQUEST)
        return JSONResponse(status_code=error.code, content=error.model_dump())

    hash_ = await url_service.shorten(payload.url)
    return ShortenResponse(hash=hash_)
