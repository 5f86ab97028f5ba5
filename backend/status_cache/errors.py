"""
Status Cache Errors

Exception hierarchy shared by the cache store, the origin client and the
HTTP routes. Route handlers translate these into HTTP status codes.
"""


class StatusCacheError(Exception):
    """Base exception for status cache operations."""


class InvalidCacheKey(StatusCacheError):
    """Raised when a key is not exactly three ASCII digits."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Invalid cache key: {key!r}")


class CacheEntryNotFound(StatusCacheError):
    """Raised when no readable entry exists for a key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No cached image for code {key}")


class CacheWriteError(StatusCacheError):
    """Raised when an entry cannot be written to the cache directory."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Failed to write cached image {key}: {reason}")


class CacheDirectoryError(StatusCacheError):
    """Raised when the cache directory cannot be created at startup."""


class OriginNotFound(StatusCacheError):
    """Raised when the origin has no image for a key or cannot be reached."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Origin has no image for code {key}: {reason}")
