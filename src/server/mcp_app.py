"""FastMCP application wiring the documentation tools to a catalog."""

from typing import Annotated, Any, Optional

from fastmcp import FastMCP
from pydantic import Field

from llmsdocs.catalog import DocsCatalog
from llmsdocs.exceptions import ToolError
from llmsdocs.schemas import ServerConfig
from llmsdocs.tools import ToolName, dispatch_tool
from llmsdocs.utils.logging_config import get_logger

logger = get_logger(__name__)


def create_server(catalog: DocsCatalog, config: ServerConfig) -> FastMCP:
    """Build a FastMCP server whose tools answer from ``catalog``.

    Tool errors (unknown tool, invalid arguments) come back as text replies
    rather than protocol errors.
    """
    mcp = FastMCP(config.server.name)
    search_defaults = config.search_defaults

    def call(tool: ToolName, arguments: dict[str, Any]) -> str:
        try:
            return dispatch_tool(catalog, config, tool.value, arguments)
        except ToolError as exc:
            logger.warning("Tool call rejected", extra={"tool": tool.value, "error": str(exc)})
            return str(exc)

    @mcp.tool(
        name=ToolName.SEARCH_DOCS.value,
        description="Search the documentation for specific topics",
    )
    def search_docs(
        query: Annotated[str, Field(description="Search query for finding relevant documentation")],
        limit: Annotated[
            Optional[int],
            Field(
                description=(
                    f"Maximum number of results to return (default: {search_defaults.max_results}, "
                    f"max: {search_defaults.max_results_cap})"
                )
            ),
        ] = None,
    ) -> str:
        return call(ToolName.SEARCH_DOCS, {"query": query, "limit": limit})

    @mcp.tool(
        name=ToolName.GET_SECTION.value,
        description="Get a specific documentation section by title or path",
    )
    def get_section(
        identifier: Annotated[str, Field(description="Section title or path to retrieve")],
    ) -> str:
        return call(ToolName.GET_SECTION, {"identifier": identifier})

    @mcp.tool(
        name=ToolName.LIST_SECTIONS.value,
        description="List all available documentation sections",
    )
    def list_sections(
        category: Annotated[
            Optional[str], Field(description="Filter sections by category (optional)")
        ] = None,
    ) -> str:
        return call(ToolName.LIST_SECTIONS, {"category": category})

    return mcp
