"""Server settings.

All settings can be configured via environment variables with the prefix
MCP_ADD_NUMBERS_. For example, MCP_ADD_NUMBERS_PORT=9000 sets port=9000.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mcp_add_numbers.utilities.logging import LogLevel

Transport = Literal["stdio", "sse", "streamable-http"]


class ServerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MCP_ADD_NUMBERS_",
        env_file=".env",
        extra="ignore",
    )

    name: str = "mcp-add-numbers"
    instructions: str = Field(
        "Use the add_numbers tool to add two integers. The result echoes both inputs "
        "alongside the sum and a readable expression such as '2 + 3 = 5'."
    )

    debug: bool = False
    log_level: LogLevel = "INFO"

    transport: Transport = "stdio"
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)

    warn_on_duplicate_tools: bool = True
