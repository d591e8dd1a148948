"""Locate, read and index the documentation corpus at startup."""

from __future__ import annotations

import asyncio
from pathlib import Path

from llmsdocs.catalog import DocsCatalog
from llmsdocs.config import LLMSDOCS_DOCS_PATH, LLMSDOCS_DOCS_URL
from llmsdocs.exceptions import DocumentLoadError
from llmsdocs.fetch import fetch_docs_text
from llmsdocs.schemas import ServerConfig, SearchSettings
from llmsdocs.section_parser import parse_sections
from llmsdocs.utils.logging_config import get_logger

logger = get_logger(__name__)


def candidate_paths(
    config: ServerConfig,
    *,
    env_path: str | None = None,
    cwd: Path | None = None,
) -> list[Path]:
    """List corpus locations in lookup order.

    The explicit path (``LLMSDOCS_DOCS_PATH`` unless ``env_path`` is given)
    comes first, then each configured fallback. Relative fallbacks are
    resolved against ``cwd``.
    """
    base = cwd or Path.cwd()
    explicit = LLMSDOCS_DOCS_PATH if env_path is None else env_path

    paths: list[Path] = []
    if explicit:
        paths.append(Path(explicit).expanduser())
    for raw in config.documentation.fallback_paths:
        if not raw:
            continue
        path = Path(raw).expanduser()
        paths.append(path if path.is_absolute() else base / path)
    return paths


def resolve_docs_path(
    config: ServerConfig,
    *,
    env_path: str | None = None,
    cwd: Path | None = None,
) -> Path | None:
    """Return the first candidate path that is an existing file."""
    tried = candidate_paths(config, env_path=env_path, cwd=cwd)
    for path in tried:
        if path.is_file():
            return path
    logger.warning(
        "Documentation file not found",
        extra={"tried_paths": [str(path) for path in tried]},
    )
    return None


def read_docs(path: Path) -> str:
    """Read the corpus as UTF-8 text.

    Raises:
        DocumentLoadError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read documentation from {path}: {exc}") from exc


def build_catalog(text: str, settings: SearchSettings, *, source: str | None = None) -> DocsCatalog:
    """Parse document text and index the resulting sections."""
    sections = parse_sections(text)
    catalog = DocsCatalog.from_sections(sections, settings, source=source)
    logger.info(
        "Loaded documentation",
        extra={"source": source, "sections": len(catalog.sections)},
    )
    return catalog


def load_catalog(path: Path | None, settings: SearchSettings) -> DocsCatalog:
    """Load the corpus at ``path`` into a catalog.

    Never raises: a missing path or a read failure is logged once and yields
    an unloaded catalog, which stays unloaded until the process restarts.
    """
    if path is None:
        return DocsCatalog.unloaded()
    try:
        text = read_docs(path)
    except DocumentLoadError as exc:
        logger.error("Error loading documentation", extra={"path": str(path), "error": str(exc)})
        return DocsCatalog.unloaded(source=str(path))
    return build_catalog(text, settings, source=str(path))


async def load_remote_catalog(url: str, settings: SearchSettings) -> DocsCatalog:
    """Download the corpus at ``url`` into a catalog; never raises on failure."""
    try:
        text = await fetch_docs_text(url)
    except (DocumentLoadError, OSError, UnicodeDecodeError) as exc:
        logger.error("Error downloading documentation", extra={"url": url, "error": str(exc)})
        return DocsCatalog.unloaded(source=url)
    return build_catalog(text, settings, source=url)


def load_startup_catalog(
    config: ServerConfig,
    *,
    env_path: str | None = None,
    docs_url: str | None = None,
    cwd: Path | None = None,
) -> DocsCatalog:
    """Build the catalog the server runs with.

    A local file (explicit path, then fallbacks) wins; otherwise the corpus
    is downloaded from ``docs_url`` (``LLMSDOCS_DOCS_URL`` by default) when
    one is configured. Must be called outside a running event loop.
    """
    settings = config.search_defaults
    path = resolve_docs_path(config, env_path=env_path, cwd=cwd)
    if path is not None:
        logger.info("Loading documentation", extra={"path": str(path)})
        return load_catalog(path, settings)

    url = LLMSDOCS_DOCS_URL if docs_url is None else docs_url
    if url:
        logger.info("Downloading documentation", extra={"url": url})
        return asyncio.run(load_remote_catalog(url, settings))

    logger.error(
        "Set LLMSDOCS_DOCS_PATH or LLMSDOCS_DOCS_URL, or place llms-full.txt in the working directory"
    )
    return DocsCatalog.unloaded()
