from __future__ import annotations

"""
MCP Server Adapter.

Exposes DirectoryWalkService as the 'walk_directory' tool of a FastMCP
server. Request-level walk failures are rendered as tool errors so the
client sees isError=true instead of a transport failure.
"""

import logging
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from filez_mcp.core.services.directory_service import DirectoryWalkService
from filez_mcp.domain.config import (
    MCP_ENDPOINT_PATH,
    SERVER_NAME,
    SERVER_TITLE,
    SERVER_VERSION,
    ServerConfig,
)
from filez_mcp.domain.errors import WalkError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TOOL METADATA
# -----------------------------------------------------------------------------

TOOL_NAME = "walk_directory"
TOOL_DESCRIPTION = "Recursively lists all files and directories under the specified path"
PATH_DESCRIPTION = "Directory path to walk (use '/' for root directory)"


# -----------------------------------------------------------------------------
# SERVER FACTORY
# -----------------------------------------------------------------------------

def build_server(service: DirectoryWalkService) -> FastMCP:
    """
    Create a FastMCP server with the walk_directory tool registered.

    Args:
        service: Walk service bound to the configured root directory.

    Returns:
        FastMCP: Server ready to run on any transport.
    """
    server = FastMCP(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        instructions=f"{SERVER_TITLE} {SERVER_VERSION}: lists entries below {service.root_directory}",
    )

    @server.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def walk_directory(
            path: Annotated[str, Field(description=PATH_DESCRIPTION)] = "/",
    ) -> str:
        logger.debug(f"{TOOL_NAME} called with path={path!r}")
        try:
            results = service.walk_directory(path)
        except WalkError as e:
            logger.warning(f"{TOOL_NAME} failed for {path!r}: {e}")
            raise ToolError(f"Error walking directory: {e}") from e
        return "\n".join(results)

    return server


def run_server(server: FastMCP, cfg: ServerConfig) -> None:
    """
    Serve until the transport closes.

    Args:
        server: Server produced by build_server.
        cfg: Validated configuration selecting the transport.
    """
    if cfg.use_stdio:
        logger.info("Starting MCP server with stdio transport")
        server.run(transport="stdio")
        return

    logger.info(f"Starting MCP server with HTTP transport on port {cfg.port}")
    logger.info(f"MCP server listening on {cfg.host}:{cfg.port}{MCP_ENDPOINT_PATH}")
    server.run(transport="http", host=cfg.host, port=cfg.port, path=MCP_ENDPOINT_PATH)
