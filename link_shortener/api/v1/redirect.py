from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from link_shortener.dependencies import get_url_service
from link_shortener.services.url_service import URLService

router = APIRouter(tags=["redirect"])


@router.get("/{hash_}")
async def redirect_to_url(
    hash_: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    Unknown hashes raise HashNotFoundError, which the app turns into a 404.
    """
    url = await url_service.resolve(hash_)
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
