"""
Application Factory

Builds the FastAPI app serving the status image cache.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .cache_store import StatusImageCache
from .origin import OriginClient
from .routes_fastapi import router

logger = logging.getLogger(__name__)


def create_app(
    cache_dir: Union[str, Path],
    origin: Optional[OriginClient] = None,
) -> FastAPI:
    """
    Create the status image cache app.

    The cache directory is expected to exist already (see
    StatusImageCache.ensure_directory); the app never creates it.

    Args:
        cache_dir: Directory holding <code>.jpg files
        origin: Client for the upstream image service (default: http.cat)
    """
    cache_store = StatusImageCache(cache_dir)
    origin = origin or OriginClient()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await origin.aclose()
        logger.info("[StatusCache] Origin client closed")

    app = FastAPI(
        title="Status Image Cache",
        description="Read-through cache for HTTP status code images",
        lifespan=lifespan,
    )
    app.state.cache_store = cache_store
    app.state.origin = origin

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_errors(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    app.include_router(router)
    return app
