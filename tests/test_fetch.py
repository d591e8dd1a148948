"""Tests for remote corpus download and caching."""

from __future__ import annotations

import os
import time
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from llmsdocs.cache_utils import cache_path_for
from llmsdocs.exceptions import FetchError
from llmsdocs.fetch import fetch_docs_text

URL = "https://docs.example.com/llms-full.txt"


class TestFetchDocsText:
    """Tests for fetch_docs_text function."""

    @pytest.mark.asyncio
    async def test_downloads_and_caches(self, tmp_path: Path) -> None:
        download = AsyncMock(return_value="# Intro\nHello")

        with patch("llmsdocs.fetch.fetch_text_with_retries", new=download):
            text = await fetch_docs_text(URL, cache_base=tmp_path)

        assert text == "# Intro\nHello"
        assert cache_path_for(URL, tmp_path).read_text(encoding="utf-8") == "# Intro\nHello"
        download.assert_awaited_once_with(URL)

    @pytest.mark.asyncio
    async def test_serves_fresh_cache(self, tmp_path: Path) -> None:
        cache_file = cache_path_for(URL, tmp_path)
        cache_file.write_text("# Cached\nbody", encoding="utf-8")
        download = AsyncMock()

        with patch("llmsdocs.fetch.fetch_text_with_retries", new=download):
            text = await fetch_docs_text(URL, cache_base=tmp_path, ttl_seconds=3600)

        assert text == "# Cached\nbody"
        download.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_refreshes_stale_cache(self, tmp_path: Path) -> None:
        cache_file = cache_path_for(URL, tmp_path)
        cache_file.write_text("# Old\nbody", encoding="utf-8")
        old_time = time.time() - 100000
        os.utime(cache_file, (old_time, old_time))

        with patch("llmsdocs.fetch.fetch_text_with_retries", new=AsyncMock(return_value="# New\nbody")):
            text = await fetch_docs_text(URL, cache_base=tmp_path, ttl_seconds=60)

        assert text == "# New\nbody"
        assert cache_file.read_text(encoding="utf-8") == "# New\nbody"

    @pytest.mark.asyncio
    async def test_skips_cache_when_disabled(self, tmp_path: Path) -> None:
        with patch("llmsdocs.fetch.fetch_text_with_retries", new=AsyncMock(return_value="body")):
            await fetch_docs_text(URL, use_cache=False, cache_base=tmp_path)

        assert not cache_path_for(URL, tmp_path).exists()

    @pytest.mark.asyncio
    async def test_propagates_fetch_errors(self, tmp_path: Path) -> None:
        with patch("llmsdocs.fetch.fetch_text_with_retries", new=AsyncMock(side_effect=FetchError("down"))):
            with pytest.raises(FetchError, match="down"):
                await fetch_docs_text(URL, cache_base=tmp_path)
