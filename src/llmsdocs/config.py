"""Local configuration for llmsdocs."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import ValidationError

from llmsdocs.exceptions import ConfigError
from llmsdocs.schemas import ServerConfig

DEFAULT_CONFIG_FILE = "config.json"
DEFAULT_CACHE_DIR = ".llmsdocs_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "llmsdocs/0.1"

# Explicit corpus location; takes precedence over configured fallback paths.
LLMSDOCS_DOCS_PATH = os.getenv("LLMSDOCS_DOCS_PATH", "")
# Remote corpus, downloaded once at startup when no local file is found.
LLMSDOCS_DOCS_URL = os.getenv("LLMSDOCS_DOCS_URL", "")
LLMSDOCS_CONFIG_PATH = os.getenv("LLMSDOCS_CONFIG_PATH", "")
LLMSDOCS_LOG_LEVEL = os.getenv("LLMSDOCS_LOG_LEVEL", "INFO")

LLMSDOCS_CACHE_PATH = Path(os.getenv("LLMSDOCS_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
LLMSDOCS_CACHE_TTL_SECONDS = int(os.getenv("LLMSDOCS_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
LLMSDOCS_FETCH_TIMEOUT_S = float(os.getenv("LLMSDOCS_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
LLMSDOCS_FETCH_MAX_RETRIES = int(os.getenv("LLMSDOCS_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
LLMSDOCS_FETCH_BACKOFF_S = float(os.getenv("LLMSDOCS_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
LLMSDOCS_USER_AGENT = os.getenv("LLMSDOCS_USER_AGENT", DEFAULT_USER_AGENT)


def load_server_config(path: Path | str | None = None) -> ServerConfig:
    """Load the server configuration from a JSON file.

    Args:
        path: Config file to read. When None, ``LLMSDOCS_CONFIG_PATH`` is used,
            then ``config.json`` in the working directory if it exists.

    Returns:
        The validated configuration. Defaults are returned when no file is
        given and the default file does not exist.

    Raises:
        ConfigError: If an explicitly requested file is missing, or any file
            cannot be read or fails validation.
    """
    explicit = path is not None or bool(LLMSDOCS_CONFIG_PATH)
    config_path = Path(path or LLMSDOCS_CONFIG_PATH or DEFAULT_CONFIG_FILE).expanduser()

    if not config_path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return ServerConfig()

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {config_path}: {exc}") from exc

    try:
        return ServerConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {config_path}: {exc}") from exc
