"""Download and cache a remote documentation corpus."""

from __future__ import annotations

from pathlib import Path

from llmsdocs.cache_utils import (
    cache_path_for,
    is_cache_fresh,
    read_text_async,
    write_text_async,
)
from llmsdocs.config import LLMSDOCS_CACHE_PATH, LLMSDOCS_CACHE_TTL_SECONDS
from llmsdocs.http_utils import fetch_text_with_retries
from llmsdocs.utils.logging_config import get_logger

logger = get_logger(__name__)


async def fetch_docs_text(
    url: str,
    *,
    use_cache: bool = True,
    cache_base: Path = LLMSDOCS_CACHE_PATH,
    ttl_seconds: int = LLMSDOCS_CACHE_TTL_SECONDS,
) -> str:
    """Fetch a corpus from ``url``, serving a fresh local copy when present.

    Args:
        url: Location of the llms-full.txt style document.
        use_cache: Whether to read and write the on-disk cache.
        cache_base: Cache directory.
        ttl_seconds: Cache lifetime; <= 0 keeps the copy forever.

    Returns:
        The document text.

    Raises:
        FetchError: If the download fails after retries.
    """
    cache_file = cache_path_for(url, cache_base)

    if use_cache and is_cache_fresh(cache_file, ttl_seconds):
        logger.debug("Using cached documentation", extra={"url": url, "cache_file": str(cache_file)})
        return await read_text_async(cache_file)

    text = await fetch_text_with_retries(url)
    if use_cache:
        try:
            await write_text_async(cache_file, text)
        except OSError as exc:
            logger.warning("Could not cache documentation", extra={"url": url, "error": str(exc)})
    return text
