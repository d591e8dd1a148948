"""Shared schemas for llmsdocs."""

from llmsdocs.schemas.config import (
    DocumentationSettings,
    ListSettings,
    SearchSettings,
    ServerConfig,
    ServerInfo,
)
from llmsdocs.schemas.search import SearchHit
from llmsdocs.schemas.sections import DocSection

__all__ = [
    "DocSection",
    "DocumentationSettings",
    "ListSettings",
    "SearchHit",
    "SearchSettings",
    "ServerConfig",
    "ServerInfo",
]
