"""Build the MCP server that exposes the addition tool."""

from mcp.server.fastmcp import FastMCP

from mcp_add_numbers.registry import ToolRegistry, default_registry
from mcp_add_numbers.settings import ServerSettings
from mcp_add_numbers.utilities.logging import get_logger

logger = get_logger(__name__)


def create_server(
    settings: ServerSettings | None = None,
    registry: ToolRegistry | None = None,
) -> FastMCP:
    """Create a FastMCP server with every tool from ``registry`` installed.

    Args:
        settings: server settings; read from the environment when omitted
        registry: tools to expose; the default table when omitted
    """
    settings = settings or ServerSettings()
    if registry is None:
        registry = default_registry(warn_on_duplicate_tools=settings.warn_on_duplicate_tools)

    server = FastMCP(
        settings.name,
        instructions=settings.instructions,
        debug=settings.debug,
        log_level=settings.log_level,
        host=settings.host,
        port=settings.port,
        warn_on_duplicate_tools=settings.warn_on_duplicate_tools,
    )
    registry.install(server)
    logger.info(f"Created {settings.name} with tools: {', '.join(entry.name for entry in registry)}")
    return server
