"""Server module entry point for running with python -m server."""

import os
import sys

from llmsdocs.config import load_server_config
from llmsdocs.exceptions import ConfigError
from llmsdocs.loader import load_startup_catalog
from llmsdocs.utils.logging_config import configure_logging, get_logger
from server.mcp_app import create_server

logger = get_logger(__name__)


def main() -> None:
    """Load the corpus once, then serve MCP requests until the client leaves."""
    configure_logging()

    try:
        config = load_server_config()
    except ConfigError as exc:
        logger.error("Invalid configuration", extra={"error": str(exc)})
        sys.exit(1)

    catalog = load_startup_catalog(config)
    mcp = create_server(catalog, config)

    transport = os.getenv("LLMSDOCS_TRANSPORT", "stdio").lower()
    logger.info(
        "Starting documentation MCP server",
        extra={
            "name": config.server.name,
            "transport": transport,
            "loaded": catalog.loaded,
            "sections": len(catalog.sections),
        },
    )

    if transport == "stdio":
        mcp.run()
    else:
        host = os.getenv("HOST", "127.0.0.1")
        port = int(os.getenv("PORT", "8000"))
        mcp.run(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main()
