"""
CLI entry point for the status image cache server.

Usage:
    status-cache --host 127.0.0.1 --port 3000 --cache ./cache [-v]
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from .app import create_app
from .cache_store import StatusImageCache
from .errors import CacheDirectoryError
from .settings import ServerConfig

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, prepare the cache directory and serve until stopped."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        config = ServerConfig(host=args.host, port=args.port, cache_dir=args.cache)
    except ValidationError as e:
        parser.error(f"invalid configuration:\n{e}")

    try:
        StatusImageCache(config.cache_dir).ensure_directory()
    except CacheDirectoryError as e:
        logger.error(f"[StatusCache] {e}")
        return 1

    app = create_app(config.cache_dir)

    logger.info(f"[StatusCache] Server running at {config.base_url}")
    logger.info("[StatusCache] Ready for GET, PUT, DELETE requests")
    uvicorn.run(app, host=config.host, port=config.port)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="status-cache",
        description="Caching proxy for HTTP status code images",
    )
    parser.add_argument("--host", required=True, help="server host (required)")
    parser.add_argument("--port", required=True, type=int, help="server port (required)")
    parser.add_argument("--cache", required=True, help="path to cache directory (required)")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


if __name__ == "__main__":
    sys.exit(main())
