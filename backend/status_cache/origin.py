"""
Origin Client

Fetches status code images from the upstream image service on cache miss.
"""

import logging
from typing import Optional

import httpx

from .errors import OriginNotFound

logger = logging.getLogger(__name__)

ORIGIN_BASE_URL = "https://http.cat"
ORIGIN_TIMEOUT_SECONDS = 30.0


class OriginClient:
    """
    Thin wrapper around httpx.AsyncClient for the image origin.

    Usage:
        origin = OriginClient()
        data = await origin.fetch("200")
        await origin.aclose()
    """

    def __init__(
        self,
        base_url: str = ORIGIN_BASE_URL,
        timeout: float = ORIGIN_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
            headers={"Accept": "image/*,*/*;q=0.8"},
        )

    async def fetch(self, key: str) -> bytes:
        """
        Download the image for a status code.

        A single attempt is made; there is no retry.

        Raises:
            OriginNotFound: if the origin answers with an error status or
                cannot be reached.
        """
        logger.info(f"[Origin] Fetching: {self.base_url}/{key}")
        try:
            response = await self.http_client.get(f"/{key}")
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"[Origin] HTTP error {e.response.status_code} for {key}")
            raise OriginNotFound(key, f"status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"[Origin] Fetch error for {key}: {e!r}")
            raise OriginNotFound(key, type(e).__name__) from e

        logger.info(f"[Origin] Fetched: {key} ({len(response.content)} bytes)")
        return response.content

    async def aclose(self) -> None:
        """Close HTTP client."""
        await self.http_client.aclose()
