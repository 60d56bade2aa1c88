"""Command line entry point."""

import click

from mcp_add_numbers.server import create_server
from mcp_add_numbers.settings import ServerSettings
from mcp_add_numbers.utilities.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default=None,
    help="Transport type (defaults to MCP_ADD_NUMBERS_TRANSPORT or stdio)",
)
@click.option("--host", default=None, help="Host to bind for HTTP transports")
@click.option("--port", type=int, default=None, help="Port to listen on for HTTP transports")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level",
)
def main(transport: str | None, host: str | None, port: int | None, log_level: str | None) -> int:
    """Run the add-numbers MCP server."""
    overrides = {
        "transport": transport,
        "host": host,
        "port": port,
        "log_level": log_level.upper() if log_level else None,
    }
    settings = ServerSettings(**{key: value for key, value in overrides.items() if value is not None})

    configure_logging(settings.log_level)
    server = create_server(settings)

    if settings.transport == "stdio":
        logger.info("Serving over stdio")
    else:
        logger.info(f"Serving over {settings.transport} on http://{settings.host}:{settings.port}")
    server.run(transport=settings.transport)
    return 0
