"""
Status Image Cache Store

File-based store for status code images:
- One file per key, named <code>.jpg
- No metadata, index or eviction
- The filesystem is the only source of truth
"""

import re
from pathlib import Path
from typing import Union
import logging

from .errors import (
    CacheDirectoryError,
    CacheEntryNotFound,
    CacheWriteError,
    InvalidCacheKey,
)

logger = logging.getLogger(__name__)

# Exactly three ASCII digits; \d would also accept other Unicode digits
CACHE_KEY_PATTERN = re.compile(r"[0-9]{3}")

IMAGE_EXTENSION = ".jpg"
IMAGE_CONTENT_TYPE = "image/jpeg"


def is_valid_key(key: str) -> bool:
    """Check that a key is a three-digit status code."""
    return CACHE_KEY_PATTERN.fullmatch(key) is not None


class StatusImageCache:
    """
    Directory-backed key-value store mapping status codes to image bytes.

    Cache structure:
    cache_dir/
    ├── 200.jpg
    ├── 404.jpg
    └── ...
    """

    def __init__(self, cache_dir: Union[str, Path]):
        self.cache_dir = Path(cache_dir)

    def ensure_directory(self) -> None:
        """
        Create the cache directory (and parents) if it doesn't exist.

        Called once at startup, before any request is served.

        Raises:
            CacheDirectoryError: if the directory cannot be created.
        """
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheDirectoryError(
                f"Failed to create cache directory {self.cache_dir}: {e}"
            ) from e
        logger.info(f"[StatusCache] Cache directory: {self.cache_dir}")

    def path_for(self, key: str) -> Path:
        """Get the file path for a cached image."""
        if not is_valid_key(key):
            raise InvalidCacheKey(key)
        return self.cache_dir / f"{key}{IMAGE_EXTENSION}"

    async def read(self, key: str) -> bytes:
        """
        Get a cached image by status code.

        Raises:
            CacheEntryNotFound: if the file is absent or unreadable.
        """
        cache_path = self.path_for(key)
        try:
            with open(cache_path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            raise CacheEntryNotFound(key)
        except OSError as e:
            logger.warning(f"[StatusCache] Failed to read {cache_path}: {e}")
            raise CacheEntryNotFound(key) from e

        logger.debug(f"[StatusCache] Cache hit: {key} ({len(data)} bytes)")
        return data

    async def write(self, key: str, data: bytes) -> None:
        """
        Create or overwrite the cached image for a status code.

        Args:
            key: Three-digit status code
            data: Image binary data, written as-is

        Raises:
            CacheWriteError: if the file cannot be written.
        """
        cache_path = self.path_for(key)
        try:
            with open(cache_path, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.error(f"[StatusCache] Failed to write {cache_path}: {e}")
            raise CacheWriteError(key, str(e)) from e

        logger.debug(f"[StatusCache] Cached: {key} ({len(data)} bytes)")

    async def delete(self, key: str) -> None:
        """
        Remove the cached image for a status code.

        Raises:
            CacheEntryNotFound: if there is no entry to remove.
        """
        cache_path = self.path_for(key)
        try:
            cache_path.unlink()
        except FileNotFoundError:
            raise CacheEntryNotFound(key)
        except OSError as e:
            logger.warning(f"[StatusCache] Failed to remove {cache_path}: {e}")
            raise CacheEntryNotFound(key) from e

        logger.debug(f"[StatusCache] Removed: {key}")
