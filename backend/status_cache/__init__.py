"""
Status Image Cache Module

Serves HTTP status code images from a local directory, fetching them from
the origin image service on first request.

Features:
- Read-through file cache, one <code>.jpg per status code
- Direct cache writes (PUT) and removals (DELETE)
- Plain-text error responses
"""

from .app import create_app
from .cache_store import StatusImageCache
from .origin import OriginClient
from .routes_fastapi import router

__all__ = ["create_app", "router", "StatusImageCache", "OriginClient"]
