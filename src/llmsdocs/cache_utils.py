"""Cache utilities for downloaded documentation corpora."""

from __future__ import annotations

import asyncio
import hashlib
from datetime import datetime, timezone
from pathlib import Path


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Check if a cached file is still fresh based on its modification time.

    Args:
        path: Path to the cached file.
        ttl_seconds: Time-to-live in seconds. If <= 0, the cache never
            expires.

    Returns:
        True if the cache is fresh and usable, False otherwise.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def cache_path_for(url: str, base_path: Path) -> Path:
    """Return the cache file used for a corpus URL.

    The file name is a short digest of the URL, so any URL maps to a safe,
    stable name.
    """
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
    return base_path / f"{digest}.txt"


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file in a worker thread."""
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file in a worker thread, creating parent directories."""
    await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
    await asyncio.to_thread(path.write_text, content, encoding=encoding)
