from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from typing import Optional
import logging

from urlshortener.schemas.URLCreateRequest import URLCreateRequest
from urlshortener.schemas.ShortenedURLResponse import ShortenedURLResponse
from urlshortener.schemas.OriginalURLResponse import OriginalURLResponse
from urlshortener.services.shortener import Shortener
from urlshortener.utils.encoding import ShortCodeGenerationError
from urlshortener.utils.urls import parse_url, url_host

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shortener"])


def get_shortener(request: Request) -> Shortener:
    """FastAPI dependency: the store built by create_app for this application."""
    return request.app.state.shortener


@router.post("/shortenurl", response_model=ShortenedURLResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(
    url_request: URLCreateRequest,
    response: Response,
    shortener: Shortener = Depends(get_shortener),
):
    original_url = url_request.original_url

    existing = shortener.get_shortened_url(original_url)
    if existing is not None:
        response.status_code = status.HTTP_200_OK
        return ShortenedURLResponse(shortened_url=existing)

    try:
        shortened_url = shortener.create_shortened_url(original_url)
    except ShortCodeGenerationError as e:
        logger.error(f"Failed to create short URL for {original_url[:50]}... due to: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error generating shortened url",
        )

    logger.info(f"API success: Shortened {original_url[:50]}... to {shortened_url}")
    return ShortenedURLResponse(shortened_url=shortened_url)


@router.get("/shortenurl", response_model=OriginalURLResponse)
def resolve_url_endpoint(
    shortened_url: Optional[str] = Query(None, alias="shortenedUrl"),
    shortener: Shortener = Depends(get_shortener),
):
    if not shortened_url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="http request doesn't contain shortenedUrl param",
        )

    try:
        parts = parse_url(shortened_url)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid url passed in request")

    if not shortener.is_valid_hostname(url_host(parts)):
        logger.warning(f"Resolve rejected, foreign host: {shortened_url[:50]}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid shortened url host passed in request",
        )

    original_url = shortener.get_original_url(shortened_url)
    if original_url is None:
        logger.warning(f"Resolve miss: {shortened_url}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="shortened url not found")

    return OriginalURLResponse(original_url=original_url)
