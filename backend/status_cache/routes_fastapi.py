"""
Status Image API Routes

Provides endpoints for:
- Serving status code images (read-through from the origin on miss)
- Writing images into the cache
- Removing cached images
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from .cache_store import IMAGE_CONTENT_TYPE, StatusImageCache, is_valid_key
from .errors import CacheEntryNotFound, CacheWriteError, OriginNotFound
from .origin import OriginClient

logger = logging.getLogger(__name__)

# ============================================
# Configuration
# ============================================

SUPPORTED_METHODS = ("GET", "PUT", "DELETE")

# Every method the fallback route answers for
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

INVALID_PATH_MESSAGE = "Invalid URL. Use /<status_code>"
NOT_FOUND_MESSAGE = "Not Found"

# ============================================
# Router
# ============================================

router = APIRouter(tags=["Status Images"])


# ============================================
# Dependencies
# ============================================

def get_cache_store(request: Request) -> StatusImageCache:
    return request.app.state.cache_store


def get_origin(request: Request) -> OriginClient:
    return request.app.state.origin


def cache_key(key: str) -> str:
    """Reject anything that is not exactly three digits before the store sees it."""
    if not is_valid_key(key):
        raise HTTPException(status_code=400, detail=INVALID_PATH_MESSAGE)
    return key


def _image_response(data: bytes, cache_status: str) -> Response:
    return Response(
        content=data,
        media_type=IMAGE_CONTENT_TYPE,
        headers={"X-Cache": cache_status},
    )


# ============================================
# Endpoints
# ============================================

@router.get("/{key}")
async def get_image(
    key: str = Depends(cache_key),
    cache_store: StatusImageCache = Depends(get_cache_store),
    origin: OriginClient = Depends(get_origin),
):
    """
    Serve the image for a status code.

    This endpoint:
    1. Returns the cached image if present
    2. Otherwise fetches it from the origin
    3. Stores the fetched image (a failed write is logged, not returned)
    4. Returns the image, or 404 if the origin has none

    Example:
        GET /418
    """
    try:
        data = await cache_store.read(key)
    except CacheEntryNotFound:
        pass
    else:
        return _image_response(data, "HIT")

    logger.info(f"[Router] Cache miss: {key}, downloading from origin")
    try:
        data = await origin.fetch(key)
    except OriginNotFound as e:
        logger.info(f"[Router] Not found: {e}")
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)

    try:
        await cache_store.write(key, data)
    except CacheWriteError as e:
        logger.error(f"[Router] Serving {key} uncached: {e}")

    return _image_response(data, "MISS")


@router.put("/{key}", status_code=201)
async def put_image(
    request: Request,
    key: str = Depends(cache_key),
    cache_store: StatusImageCache = Depends(get_cache_store),
):
    """
    Write or replace the cached image for a status code.

    The whole request body is buffered and stored unchanged.
    """
    body = await request.body()

    try:
        await cache_store.write(key, body)
    except CacheWriteError:
        raise HTTPException(status_code=500, detail="Failed to write file")

    logger.info(f"[Router] Stored: {key} ({len(body)} bytes)")
    return PlainTextResponse(f"Cached image for code {key}", status_code=201)


@router.delete("/{key}")
async def delete_image(
    key: str = Depends(cache_key),
    cache_store: StatusImageCache = Depends(get_cache_store),
):
    """Remove the cached image for a status code."""
    try:
        await cache_store.delete(key)
    except CacheEntryNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)

    logger.info(f"[Router] Deleted: {key}")
    return PlainTextResponse(f"Deleted cached image {key}")


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def fallback(path: str):
    """
    Catch requests no endpoint above handles.

    Malformed paths get 400 whatever the method; a well-formed key with an
    unsupported method gets 405.
    """
    if not is_valid_key(path):
        raise HTTPException(status_code=400, detail=INVALID_PATH_MESSAGE)
    raise HTTPException(
        status_code=405,
        detail="Method Not Allowed",
        headers={"Allow": ", ".join(SUPPORTED_METHODS)},
    )
