"""
Status image cache test configuration.

Fixtures:
- cache_dir / cache_store: an empty, existing cache directory per test
- origin_stub: records origin requests and answers from a dict of images
- client: TestClient wired to both
"""

import sys
from pathlib import Path
from typing import Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

# Add the backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from status_cache.app import create_app
from status_cache.cache_store import StatusImageCache
from status_cache.origin import OriginClient


# ============================================
# Origin stub
# ============================================

class OriginStub:
    """
    Stand-in for the upstream image service.

    Serves images from `images`, answers 404 for anything else, and raises a
    connection error for every request while `offline` is set.
    """

    def __init__(self):
        self.images: Dict[str, bytes] = {}
        self.requests: List[str] = []
        self.offline = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        key = request.url.path.lstrip("/")
        self.requests.append(key)
        if self.offline:
            raise httpx.ConnectError("origin unreachable", request=request)
        if key not in self.images:
            return httpx.Response(404, content=b"<html>not found</html>")
        return httpx.Response(
            200,
            content=self.images[key],
            headers={"Content-Type": "image/jpeg"},
        )

    def client(self) -> OriginClient:
        return OriginClient(
            base_url="https://origin.test",
            transport=httpx.MockTransport(self.handler),
        )


# ============================================
# Fixtures
# ============================================

@pytest.fixture
def cache_dir(tmp_path):
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def cache_store(cache_dir):
    return StatusImageCache(cache_dir)


@pytest.fixture
def origin_stub():
    return OriginStub()


@pytest.fixture
def client(cache_dir, origin_stub):
    """
    TestClient for an app backed by `cache_dir` and `origin_stub`.

    Entering the client runs the app lifespan, so the origin client is
    closed when the test finishes.
    """
    app = create_app(cache_dir, origin=origin_stub.client())
    with TestClient(app) as test_client:
        yield test_client


# ============================================
# Helper Functions
# ============================================

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + bytes(range(256)) + b"\xff\xd9"


def cached_files(cache_dir: Path) -> List[str]:
    """Names of all entries in the cache directory, sorted."""
    return sorted(p.name for p in cache_dir.iterdir())
