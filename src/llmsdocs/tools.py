"""Tool definitions and dispatch for the documentation server."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from llmsdocs.catalog import DocsCatalog
from llmsdocs.exceptions import ToolArgumentError, UnknownToolError
from llmsdocs.output_formatter import (
    format_search_results,
    format_section,
    format_section_list,
)
from llmsdocs.schemas import ServerConfig
from llmsdocs.utils.logging_config import get_logger

logger = get_logger(__name__)


class ToolName(str, Enum):
    """Tools exposed to MCP clients."""

    SEARCH_DOCS = "search_docs"
    GET_SECTION = "get_section"
    LIST_SECTIONS = "list_sections"

    @classmethod
    def parse(cls, name: str) -> "ToolName":
        try:
            return cls(name)
        except ValueError as exc:
            raise UnknownToolError(f"Unknown tool: {name}") from exc


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SearchDocsArgs(_ToolArgs):
    """Arguments for ``search_docs``."""

    query: str = Field(..., min_length=1)
    limit: int | None = Field(None, ge=0)


class GetSectionArgs(_ToolArgs):
    """Arguments for ``get_section``."""

    identifier: str = Field(..., min_length=1)


class ListSectionsArgs(_ToolArgs):
    """Arguments for ``list_sections``."""

    category: str | None = None


_ARGUMENT_MODELS: dict[ToolName, type[_ToolArgs]] = {
    ToolName.SEARCH_DOCS: SearchDocsArgs,
    ToolName.GET_SECTION: GetSectionArgs,
    ToolName.LIST_SECTIONS: ListSectionsArgs,
}


def effective_limit(requested: int | None, config: ServerConfig) -> int:
    """Default an omitted limit and clamp a given one to the configured cap."""
    defaults = config.search_defaults
    if requested is None:
        return defaults.max_results
    return min(requested, defaults.max_results_cap)


def search_docs(catalog: DocsCatalog, config: ServerConfig, args: SearchDocsArgs) -> str:
    limit = effective_limit(args.limit, config)
    hits = catalog.search(args.query, limit)
    logger.debug(
        "search_docs",
        extra={"query": args.query, "limit": limit, "hits": None if hits is None else len(hits)},
    )
    return format_search_results(
        args.query, hits, preview_length=config.documentation.preview_length
    )


def get_section(catalog: DocsCatalog, config: ServerConfig, args: GetSectionArgs) -> str:
    return format_section(args.identifier, catalog.get_section(args.identifier))


def list_sections(catalog: DocsCatalog, config: ServerConfig, args: ListSectionsArgs) -> str:
    return format_section_list(
        catalog.list_sections(args.category),
        category=args.category,
        max_sections=config.list_defaults.max_sections,
    )


def validate_arguments(tool: ToolName, arguments: Mapping[str, Any] | None) -> _ToolArgs:
    """Validate raw arguments against the tool's model.

    Raises:
        ToolArgumentError: If required arguments are missing or mistyped.
    """
    try:
        return _ARGUMENT_MODELS[tool].model_validate(dict(arguments or {}))
    except ValidationError as exc:
        raise ToolArgumentError(f"Invalid arguments for {tool.value}: {exc}") from exc


def dispatch_tool(
    catalog: DocsCatalog,
    config: ServerConfig,
    name: str,
    arguments: Mapping[str, Any] | None = None,
) -> str:
    """Run one tool call and return its text reply.

    Raises:
        UnknownToolError: If ``name`` is not a supported tool.
        ToolArgumentError: If the arguments fail validation.
    """
    tool = ToolName.parse(name)
    args = validate_arguments(tool, arguments)

    if tool is ToolName.SEARCH_DOCS:
        return search_docs(catalog, config, args)
    if tool is ToolName.GET_SECTION:
        return get_section(catalog, config, args)
    if tool is ToolName.LIST_SECTIONS:
        return list_sections(catalog, config, args)
    raise UnknownToolError(f"Unknown tool: {name}")
