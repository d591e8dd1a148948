"""HTTP utilities for the optional remote corpus download."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from llmsdocs.config import (
    LLMSDOCS_FETCH_BACKOFF_S,
    LLMSDOCS_FETCH_MAX_RETRIES,
    LLMSDOCS_FETCH_TIMEOUT_S,
    LLMSDOCS_USER_AGENT,
)
from llmsdocs.exceptions import FetchError
from llmsdocs.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5
# Upper bound on a server-requested Retry-After delay.
_MAX_RETRY_AFTER_S: Final[float] = 60.0


class _RetryableResponse(Exception):
    def __init__(self, status_code: int, retry_after: float | None) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.retry_after = retry_after


def retry_after_seconds(response: httpx.Response) -> float | None:
    """Return the delay-seconds form of a ``Retry-After`` header, capped.

    The HTTP-date form is ignored and falls back to exponential backoff.
    """
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return min(max(seconds, 0.0), _MAX_RETRY_AFTER_S)


async def _get_text(http_client: httpx.AsyncClient, url: str) -> str:
    response = await http_client.get(url)
    if response.status_code == 404:
        raise FetchError(f"Documentation not found at {url}")
    if response.status_code in RETRY_STATUS_CODES:
        raise _RetryableResponse(response.status_code, retry_after_seconds(response))
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(f"HTTP {exc.response.status_code} from {url}") from exc
    return response.text


async def fetch_text_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    max_retries: int = LLMSDOCS_FETCH_MAX_RETRIES,
    backoff_s: float = LLMSDOCS_FETCH_BACKOFF_S,
) -> str:
    """Fetch text from a URL, retrying transient failures.

    Connection errors and 429/5xx replies are retried with a delay of
    ``backoff_s * 2**attempt``, or the server's ``Retry-After`` seconds
    when it sends one.

    Raises:
        FetchError: On 404, another non-retryable status, or when all
            retries are exhausted.
    """
    if client is None:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(LLMSDOCS_FETCH_TIMEOUT_S),
            headers={"User-Agent": LLMSDOCS_USER_AGENT},
            follow_redirects=True,
            max_redirects=_MAX_REDIRECTS,
        ) as new_client:
            return await fetch_text_with_retries(
                url, client=new_client, max_retries=max_retries, backoff_s=backoff_s
            )

    failure = ""
    for attempt in range(max_retries + 1):
        delay = backoff_s * (2**attempt)
        try:
            return await _get_text(client, url)
        except _RetryableResponse as exc:
            failure = f"HTTP {exc.status_code} from {url}"
            if exc.retry_after is not None:
                delay = exc.retry_after
        except httpx.RequestError as exc:
            failure = str(exc) or type(exc).__name__

        if attempt < max_retries:
            logger.warning(
                "Retrying documentation download",
                extra={"url": url, "attempt": attempt + 1, "delay_s": delay, "error": failure},
            )
            await asyncio.sleep(delay)

    raise FetchError(f"Failed to fetch {url}: {failure}")
