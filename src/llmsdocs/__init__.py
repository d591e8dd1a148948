"""llmsdocs: fuzzy search over a single-file documentation corpus."""

from llmsdocs.catalog import DocsCatalog
from llmsdocs.config import load_server_config
from llmsdocs.exceptions import (
    ConfigError,
    DocumentLoadError,
    FetchError,
    LlmsDocsError,
    ToolArgumentError,
    ToolError,
    UnknownToolError,
)
from llmsdocs.fuzzy import fuzzy_match
from llmsdocs.loader import load_catalog, load_startup_catalog, resolve_docs_path
from llmsdocs.schemas import DocSection, SearchHit, SearchSettings, ServerConfig
from llmsdocs.search_index import SearchIndex, filter_by_category, find_by_identifier
from llmsdocs.section_parser import parse_sections
from llmsdocs.tools import ToolName, dispatch_tool

__all__ = [
    "ConfigError",
    "DocSection",
    "DocsCatalog",
    "DocumentLoadError",
    "FetchError",
    "LlmsDocsError",
    "SearchHit",
    "SearchIndex",
    "SearchSettings",
    "ServerConfig",
    "ToolArgumentError",
    "ToolError",
    "ToolName",
    "UnknownToolError",
    "dispatch_tool",
    "filter_by_category",
    "find_by_identifier",
    "fuzzy_match",
    "load_catalog",
    "load_server_config",
    "load_startup_catalog",
    "parse_sections",
    "resolve_docs_path",
]
